from .factory import get_line_parser_factory, get_netlist, get_parser, parse_lines
from .parser import LineParser, LineParserFactory, Parser
from .spice import SpiceLineParser, SpiceLineParserFactory
from .validator import model_references, validate

__all__ = [
    "get_line_parser_factory",
    "get_netlist",
    "get_parser",
    "parse_lines",
    "LineParser",
    "LineParserFactory",
    "Parser",
    "SpiceLineParser",
    "SpiceLineParserFactory",
    "model_references",
    "validate",
]
