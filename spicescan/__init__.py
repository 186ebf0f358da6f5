"""
spicescan: Concurrent SPICE netlist parser.

Parses SPICE-style netlists into a structured Netlist with a worker pool,
collecting per-line diagnostics instead of stopping at the first error.
"""

from spicescan.config import ParserConfig
from spicescan.errors import NetlistReadError, NetlistSourceError, SpiceScanError
from spicescan.ingestor import get_netlist, parse_lines
from spicescan.models import (
    Command,
    Component,
    ComponentType,
    Model,
    Netlist,
    NetlistFormat,
    ParseError,
    ParseResult,
    Severity,
)

__all__ = [
    "ParserConfig",
    "NetlistReadError",
    "NetlistSourceError",
    "SpiceScanError",
    "get_netlist",
    "parse_lines",
    "Command",
    "Component",
    "ComponentType",
    "Model",
    "Netlist",
    "NetlistFormat",
    "ParseError",
    "ParseResult",
    "Severity",
]
