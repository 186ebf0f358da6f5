"""
Defines the concurrent parsing engine and abstractions.

Provides the threaded fan-out infrastructure for parsing netlists line by
line with a worker pool. Delegates format-specific statement parsing to
LineParser subclasses. Workers are stateless: every parsed line becomes a
LineOutcome message, and a single aggregation thread owns the Netlist and
the diagnostics list.
"""

from __future__ import annotations

import abc
import logging
import queue
import threading
from pathlib import Path
from typing import Iterable

from spicescan.config import ParserConfig
from spicescan.errors import NetlistReadError, StatementError
from spicescan.ingestor.tokenizer import tokenize
from spicescan.models.netlist import Command, Component, Model, Netlist
from spicescan.models.parsing import LineOutcome, ParseError, ParseResult, Severity, Statement, StatementKind

__all__ = ["LineParserFactory", "LineParser", "Parser"]

logger = logging.getLogger(__name__)

_SENTINEL = object()


class LineParserFactory(abc.ABC):
    """
    Abstract factory for creating LineParser instances.

    Subclasses provide format-specific LineParser construction logic. One
    LineParser is created per worker thread.
    """

    @abc.abstractmethod
    def __call__(self, config: ParserConfig) -> LineParser:
        """
        Creates a LineParser.

        :param config: Session configuration.
        :return: Format-specific LineParser instance.
        """


class LineParser(abc.ABC):
    """
    Abstract base class for format-specific statement parsers.

    Subclasses implement the grammars for instances, declarations and
    directives; ``parse`` dispatches on the statement kind and converts
    StatementErrors into diagnostics.
    """

    def __init__(self, config: ParserConfig):
        self.config = config
        self.errors: list[ParseError] = []
        self.current_line_number = 0
        self._current_text: str | None = None

    @abc.abstractmethod
    def parse_instance(self, statement: Statement) -> Component:
        """
        Parses a component instance statement.

        :param statement: INSTANCE statement.
        :return: Parsed Component.
        :raises StatementError: If the line does not form a valid component.
        """

    @abc.abstractmethod
    def parse_declaration(self, statement: Statement) -> Model:
        """
        Parses a model card statement.

        :param statement: MODEL_CARD statement.
        :return: Parsed Model.
        :raises StatementError: If the line does not form a valid model card.
        """

    @abc.abstractmethod
    def parse_directive(self, statement: Statement) -> Command:
        """
        Parses a simulation directive statement.

        :param statement: DIRECTIVE statement.
        :return: Parsed Command.
        :raises StatementError: If the directive is empty.
        """

    def report(self, message: str, severity: Severity = Severity.WARNING) -> None:
        """Records a non-blocking diagnostic for the line being parsed."""
        self.errors.append(ParseError(self.current_line_number, message, severity, self._current_text))

    def parse(self, statement: Statement) -> LineOutcome:
        """
        Parses one statement into an outcome message.

        :param statement: Classified statement.
        :return: LineOutcome with the parsed record and/or diagnostics.
        """
        self.current_line_number = statement.line_number
        self._current_text = statement.text
        self.errors = []
        outcome = LineOutcome(line_number=statement.line_number)
        try:
            match statement.kind:
                case StatementKind.COMMENT:
                    outcome.title = statement.text or None
                case StatementKind.MODEL_CARD:
                    outcome.model = self.parse_declaration(statement)
                case StatementKind.DIRECTIVE:
                    outcome.command = self.parse_directive(statement)
                case StatementKind.INSTANCE:
                    outcome.component = self.parse_instance(statement)
                case _:
                    raise ValueError(f"Unhandled statement kind: {statement.kind}")
        except StatementError as e:
            self.report(e.message, e.severity)
        outcome.errors = self.errors
        return outcome


class _ParseWorker(threading.Thread):
    """Dequeues numbered lines, parses them and forwards outcomes."""

    def __init__(self, index: int, line_parser: LineParser, lines: queue.Queue, outcomes: queue.Queue):
        super().__init__(name=f"spicescan-worker-{index}", daemon=True)
        self.line_parser = line_parser
        self.lines = lines
        self.outcomes = outcomes
        self.failure: BaseException | None = None
        self.parsed = 0

    def run(self):
        while (item := self.lines.get()) is not _SENTINEL:
            if self.failure is not None:
                # keep draining so the producer never blocks on a full queue
                continue
            line_number, raw = item
            try:
                statement = tokenize(line_number, raw)
                if statement is None:
                    continue
                outcome = self.line_parser.parse(statement)
            except Exception as e:
                logger.exception("Worker %s failed on line %d", self.name, line_number)
                self.failure = e
                continue
            self.parsed += 1
            self.outcomes.put(outcome)
        logger.debug("Worker %s finished after %d statements", self.name, self.parsed)


class _Aggregator(threading.Thread):
    """
    Single owner of the netlist and diagnostics during the concurrent phase.

    Title: the comment with the smallest line number wins.
    Models: for a repeated name, the card with the largest line number wins.
    """

    def __init__(self, filepath: str, outcomes: queue.Queue, ordered: bool):
        super().__init__(name="spicescan-aggregator", daemon=True)
        self.filepath = filepath
        self.outcomes = outcomes
        self.ordered = ordered
        self.netlist = Netlist()
        self.errors: list[ParseError] = []
        self.failure: BaseException | None = None
        self._title_line: int | None = None

    def run(self):
        while (outcome := self.outcomes.get()) is not _SENTINEL:
            if self.failure is not None:
                continue
            try:
                self.apply(outcome)
            except Exception as e:
                logger.exception("Aggregator failed on line %d", outcome.line_number)
                self.failure = e

    def apply(self, outcome: LineOutcome) -> None:
        netlist = self.netlist
        if outcome.title is not None and (self._title_line is None or outcome.line_number < self._title_line):
            netlist.title = outcome.title
            self._title_line = outcome.line_number
        if outcome.component is not None:
            netlist.components.append(outcome.component)
        if outcome.command is not None:
            netlist.commands.append(outcome.command)
        if (model := outcome.model) is not None:
            current = netlist.models.get(model.name)
            if current is None or current.line_number < model.line_number:
                netlist.models[model.name] = model
        for error in outcome.errors:
            logger.debug("%s line %d: [%s] %s", self.filepath, error.line_number, error.severity, error.message)
        self.errors.extend(outcome.errors)

    def result(self) -> ParseResult:
        netlist = self.netlist
        errors = self.errors
        if self.ordered:
            netlist.components.sort(key=lambda component: component.line_number)
            netlist.commands.sort(key=lambda command: command.line_number)
            netlist.models = dict(sorted(netlist.models.items(), key=lambda item: item[1].line_number))
            errors.sort(key=lambda error: error.sort_key)
        return ParseResult(filepath=self.filepath, netlist=netlist, errors=errors)


class Parser:
    """
    High-level parser coordinating line reading and concurrent parsing.

    The calling thread reads lines into a bounded queue (blocking when it is
    full), a fixed pool of worker threads parses them, and one aggregation
    thread assembles the result.
    """

    def __init__(
        self,
        filepath: str | Path,
        lines: Iterable[str],
        line_parser_factory: LineParserFactory,
        config: ParserConfig | None = None,
    ):
        """
        Initializes parser with a line source and factory.

        :param filepath: Path (or label) of the source, used in results and errors.
        :param lines: Iterable of physical lines without terminators.
        :param line_parser_factory: Factory for creating per-worker LineParsers.
        :param config: Session configuration.
        """
        self.filepath = str(filepath)
        self.lines = lines
        self.line_parser_factory = line_parser_factory
        self.config = config or ParserConfig()

    def parse(self) -> ParseResult:
        """
        Parses all lines using the worker pool.

        :return: Aggregated ParseResult (before semantic validation).
        :raises NetlistReadError: If reading the source fails.
        """
        num_workers = self.config.resolved_workers()
        line_queue: queue.Queue = queue.Queue(maxsize=self.config.queue_size)
        outcome_queue: queue.Queue = queue.Queue(maxsize=self.config.queue_size)

        aggregator = _Aggregator(self.filepath, outcome_queue, ordered=self.config.ordered)
        workers = [
            _ParseWorker(index, self.line_parser_factory(self.config), line_queue, outcome_queue)
            for index in range(num_workers)
        ]
        logger.info("Parsing %s with %d workers", self.filepath, num_workers)

        aggregator.start()
        for worker in workers:
            worker.start()

        line_number = 0
        read_error: OSError | None = None
        try:
            for raw in self.lines:
                line_number += 1
                line_queue.put((line_number, raw))
        except OSError as e:
            read_error = e
        finally:
            for _ in workers:
                line_queue.put(_SENTINEL)
            for worker in workers:
                worker.join()
            outcome_queue.put(_SENTINEL)
            aggregator.join()

        if read_error is not None:
            logger.error("Reading %s failed after line %d: %s", self.filepath, line_number, read_error)
            raise NetlistReadError(self.filepath, line_number, str(read_error)) from read_error
        for thread in (*workers, aggregator):
            if thread.failure is not None:
                raise thread.failure

        result = aggregator.result()
        logger.info(
            "Parsed %d lines from %s: %d components, %d models, %d commands, %d diagnostics",
            line_number,
            self.filepath,
            len(result.netlist.components),
            len(result.netlist.models),
            len(result.netlist.commands),
            len(result.errors),
        )
        return result
