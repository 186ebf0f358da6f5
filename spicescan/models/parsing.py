"""
Defines parsing infrastructure for netlist ingestion.

Provides statement kinds, diagnostic records, and result containers for the
parsing phase where raw text is converted to structured data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from .netlist import Command, Component, Model, Netlist

__all__ = ["Severity", "StatementKind", "Statement", "ParseError", "LineOutcome", "ParseResult"]


class Severity(Enum):
    """
    Enumeration of diagnostic severities.

    ERROR: The offending statement was not recorded.
    WARNING: The statement was recorded, possibly with some input dropped.
    """

    WARNING = "WARNING"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


class StatementKind(Enum):
    """
    Enumeration of statement kinds produced by the tokenizer.

    COMMENT: Line starting with '*'; a title candidate.
    MODEL_CARD: A '.model' declaration.
    DIRECTIVE: Any other dot-command (e.g. '.tran').
    INSTANCE: A component instance line.
    """

    COMMENT = auto()
    MODEL_CARD = auto()
    DIRECTIVE = auto()
    INSTANCE = auto()


@dataclass(slots=True, frozen=True)
class Statement:
    """
    A single tokenized, classified source line.

    :param line_number: 1-indexed line number in the source.
    :param kind: Classification of the line.
    :param tokens: Whitespace-separated tokens of the stripped line.
    :param text: Stripped line content (comment body for COMMENT statements).
    """

    line_number: int
    kind: StatementKind
    tokens: tuple[str, ...]
    text: str


@dataclass(slots=True)
class ParseError:
    """
    Records a single parsing diagnostic with source context.

    :param line_number: 1-indexed line number where the diagnostic occurred.
    :param message: Human-readable error description.
    :param severity: Diagnostic severity.
    :param line_content: Optional raw line content for debugging.
    """

    line_number: int
    message: str
    severity: Severity = Severity.ERROR
    line_content: str | None = None

    @property
    def sort_key(self) -> tuple[int, str, str]:
        return (self.line_number, self.severity.value, self.message)

    def to_dict(self) -> dict:
        return {"line": self.line_number, "message": self.message, "severity": self.severity.value}

    def write(self, stream: TextIO, indent: int = 0):
        stream.write(f"{' '*indent*4}[{self.severity}] Line {self.line_number}: {self.message}\n")


@dataclass(slots=True)
class LineOutcome:
    """
    Message sent from a parse worker to the aggregation task.

    A worker emits exactly one outcome per non-blank line. At most one of
    ``component``, ``command`` or ``model`` is set; ``title`` is set for comments.

    :param line_number: Line the outcome belongs to.
    :param component: Parsed component instance, if any.
    :param command: Parsed directive, if any.
    :param model: Parsed model card, if any.
    :param title: Comment body, if the line was a comment.
    :param errors: Diagnostics raised while parsing the line.
    """

    line_number: int
    component: Component | None = None
    command: Command | None = None
    model: Model | None = None
    title: str | None = None
    errors: list[ParseError] = field(default_factory=list)


@dataclass(slots=True)
class ParseResult:
    """
    Encapsulates the result of a parsing operation.

    :param filepath: The path to the file that was parsed.
    :param netlist: Netlist assembled from all successfully parsed statements.
    :param errors: List of diagnostics encountered during parsing and validation.
    """

    filepath: str
    netlist: Netlist
    errors: list[ParseError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(error.severity is Severity.ERROR for error in self.errors)

    def to_dict(self) -> dict:
        return {
            "netlist": self.netlist.to_dict(),
            "errors": [error.to_dict() for error in self.errors],
        }
