from .format import NetlistFormat
from .netlist import Command, Component, ComponentType, Model, Netlist
from .parsing import LineOutcome, ParseError, ParseResult, Severity, Statement, StatementKind

__all__ = [
    "NetlistFormat",
    "Command",
    "Component",
    "ComponentType",
    "Model",
    "Netlist",
    "LineOutcome",
    "ParseError",
    "ParseResult",
    "Severity",
    "Statement",
    "StatementKind",
]
