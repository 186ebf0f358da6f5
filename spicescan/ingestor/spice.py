"""
Defines SPICE-specific parsing logic and constants.

This module contains the three SPICE statement grammars: component
instances, .model cards and dot-directives. Grammars raise StatementError on
malformed input; the LineParser base turns those into diagnostics.
"""

from spicescan.config import ParserConfig
from spicescan.errors import StatementError, ValueDecodeError
from spicescan.ingestor.parser import LineParser, LineParserFactory
from spicescan.ingestor.tokenizer import DIRECTIVE_CHAR
from spicescan.ingestor.values import parse_value
from spicescan.models.netlist import Command, Component, ComponentType, Model
from spicescan.models.parsing import Statement

__all__ = ["SpiceLineParser", "SpiceLineParserFactory", "ANALYSIS_COMMANDS"]

# Only these directives have their key=value options recorded.
ANALYSIS_COMMANDS = frozenset({"TRAN", "AC", "DC"})

_INVALID_COMPONENT = "invalid component syntax"
_INVALID_MODEL = "invalid model syntax"


def _is_word(token: str) -> bool:
    """Checks that a token only holds ASCII letters, digits and underscores."""
    return bool(token) and all(c.isascii() and (c.isalnum() or c == "_") for c in token)


def _is_designator(token: str) -> bool:
    return _is_word(token) and token[0].isalpha()


def _split_option(token: str) -> tuple[str, str] | None:
    if "=" not in token:
        return None
    key, value = token.split("=", 1)
    return key, value


class SpiceLineParser(LineParser):
    """SPICE-specific statement parser."""

    def parse_instance(self, statement: Statement) -> Component:
        tokens = statement.tokens
        designator = tokens[0]
        if len(tokens) < 3 or not _is_designator(designator):
            raise StatementError(_INVALID_COMPONENT)

        prefix = designator[0].upper()
        try:
            component_type = ComponentType.from_prefix(prefix)
        except ValueError:
            raise StatementError(f"unsupported component type: {prefix}") from None

        # Designator, nodes, then the value (passives) or model name.
        arity = component_type.arity
        if len(tokens) < arity + 2:
            raise StatementError(_INVALID_COMPONENT)
        nodes = list(tokens[1 : arity + 1])
        reference = tokens[arity + 1]

        params: dict[str, float] = {}
        model = None
        if component_type.is_passive:
            # Anything after a passive value is ignored.
            params["value"] = parse_value(reference)
        elif "=" in reference:
            raise StatementError(_INVALID_COMPONENT)
        else:
            model = reference
            self._extract_params(tokens[arity + 2 :], params)
        return Component(
            name=designator,
            type=component_type,
            nodes=nodes,
            model=model,
            params=params,
            line_number=statement.line_number,
        )

    def _extract_params(self, tokens: tuple[str, ...], params: dict[str, float]) -> None:
        """
        Decodes trailing key=value instance parameters into ``params``.

        :raises StatementError: If a token is not a key=value pair.
        :raises ValueDecodeError: If a value cannot be decoded.
        """
        for token in tokens:
            option = _split_option(token)
            if option is None or not option[0]:
                raise StatementError(_INVALID_COMPONENT)
            key, value = option
            params[key] = parse_value(value)

    def parse_declaration(self, statement: Statement) -> Model:
        """
        Parses a SPICE .model card.

        Parameters may be wrapped in parentheses. A parameter whose value
        cannot be decoded is dropped from the model and, unless disabled in
        the config, reported as a warning.

        :param statement: MODEL_CARD statement.
        :return: Parsed Model.
        """
        tokens = statement.tokens
        if len(tokens) < 3 or not (_is_word(tokens[1]) and _is_word(tokens[2])):
            raise StatementError(_INVALID_MODEL)
        _, name, model_type, *rest = tokens

        params: dict[str, float] = {}
        for token in rest:
            token = token.strip("()")
            if not (option := _split_option(token)):
                continue
            key, value = option
            try:
                if not key:
                    raise ValueDecodeError("missing parameter name")
                params[key] = parse_value(value)
            except ValueDecodeError as e:
                if self.config.report_dropped_parameters:
                    self.report(f"invalid model parameter: {token} ({e.message})")
        return Model(name=name, type=model_type, params=params, line_number=statement.line_number)

    def parse_directive(self, statement: Statement) -> Command:
        """
        Parses a dot-directive other than .model.

        Unrecognized directives are kept with no options.

        :param statement: DIRECTIVE statement.
        :return: Parsed Command.
        """
        parts = statement.text[len(DIRECTIVE_CHAR) :].split()
        if not parts:
            raise StatementError("empty command")

        command = Command(type=parts[0].upper(), line_number=statement.line_number)
        if command.type in ANALYSIS_COMMANDS:
            for token in parts[1:]:
                if option := _split_option(token):
                    key, value = option
                    command.options[key] = value
        return command


class SpiceLineParserFactory(LineParserFactory):
    """
    Factory for creating SPICE-specific LineParsers.
    """

    def __call__(self, config: ParserConfig) -> LineParser:
        return SpiceLineParser(config)
