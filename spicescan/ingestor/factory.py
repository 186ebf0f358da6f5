"""
Factory functions for creating parsers and running the full pipeline.

Provides high-level entry points that wire together the format-specific
line parser, the concurrent Parser and the semantic validator.
"""

import logging
from pathlib import Path
from typing import Iterable

from spicescan.config import ParserConfig
from spicescan.ingestor.common import open_source
from spicescan.ingestor.parser import LineParserFactory, Parser
from spicescan.ingestor.spice import SpiceLineParserFactory
from spicescan.ingestor.validator import validate
from spicescan.models import NetlistFormat, ParseResult

__all__ = ["get_line_parser_factory", "get_parser", "get_netlist", "parse_lines"]

logger = logging.getLogger(__name__)


def get_line_parser_factory(netlist_format: NetlistFormat) -> LineParserFactory:
    """
    Creates a line parser factory for the specified format.

    :param netlist_format: Target netlist format.
    :return: Format-specific LineParserFactory.
    :raises ValueError: If format is unsupported.
    """
    match netlist_format:
        case NetlistFormat.SPICE:
            return SpiceLineParserFactory()
        case _:
            raise ValueError(f"Unsupported netlist format: {netlist_format}")


def get_parser(
    filepath: str | Path,
    lines: Iterable[str],
    netlist_format: NetlistFormat = NetlistFormat.SPICE,
    config: ParserConfig | None = None,
) -> Parser:
    """
    Creates a parser for the specified netlist format.

    :param filepath: Path (or label) of the source.
    :param lines: Iterable of physical lines.
    :param netlist_format: Target netlist format.
    :param config: Session configuration.
    :return: Configured Parser instance.
    """
    return Parser(filepath, lines, get_line_parser_factory(netlist_format), config)


def parse_lines(
    lines: Iterable[str],
    config: ParserConfig | None = None,
    filepath: str = "<memory>",
    netlist_format: NetlistFormat = NetlistFormat.SPICE,
) -> ParseResult:
    """
    Parses and validates netlist lines from any iterable.

    :param lines: Physical lines of the netlist.
    :param config: Session configuration.
    :param filepath: Label recorded in the result.
    :param netlist_format: Format of the netlist.
    :return: Validated ParseResult.
    """
    result = get_parser(filepath, lines, netlist_format, config).parse()
    validate(result)
    return result


def get_netlist(
    filepath: str | Path,
    netlist_format: NetlistFormat | None = None,
    config: ParserConfig | None = None,
) -> ParseResult:
    """
    Parses and validates a netlist file.

    :param filepath: Path to the netlist file.
    :param netlist_format: Format of the netlist (default: guessed from the suffix).
    :param config: Session configuration.
    :return: Validated ParseResult.
    :raises NetlistSourceError: If the file cannot be opened.
    :raises NetlistReadError: If reading the file fails midway.
    """
    netlist_format = netlist_format or NetlistFormat.from_path(filepath)
    logger.debug("Reading %s as %s", filepath, netlist_format.name)
    with open_source(filepath) as lines:
        return parse_lines(lines, config=config, filepath=str(filepath), netlist_format=netlist_format)
