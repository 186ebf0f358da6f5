"""
Defines the exception hierarchy.

Fatal errors (``SpiceScanError`` subclasses) abort a parse because the source
cannot be accessed. Statement errors never leave a worker: the line parser
turns them into ``ParseError`` diagnostics and moves on to the next line.
"""

from pathlib import Path

from spicescan.models.parsing import Severity

__all__ = ["SpiceScanError", "NetlistSourceError", "NetlistReadError", "StatementError", "ValueDecodeError"]


class SpiceScanError(Exception):
    """Base class for fatal parsing failures."""


class NetlistSourceError(SpiceScanError):
    """Raised when the netlist source cannot be opened."""

    def __init__(self, filepath: str | Path, reason: str):
        super().__init__(f"cannot open netlist '{filepath}': {reason}")
        self.filepath = str(filepath)
        self.reason = reason


class NetlistReadError(SpiceScanError):
    """Raised when reading the source fails after parsing has started."""

    def __init__(self, filepath: str | Path, line_number: int, reason: str):
        super().__init__(f"failed reading '{filepath}' after line {line_number}: {reason}")
        self.filepath = str(filepath)
        self.line_number = line_number
        self.reason = reason


class StatementError(Exception):
    """
    A recoverable failure to parse one statement.

    :param message: Diagnostic text reported for the line.
    :param severity: Severity the diagnostic is reported with.
    """

    def __init__(self, message: str, severity: Severity = Severity.ERROR):
        super().__init__(message)
        self.message = message
        self.severity = severity


class ValueDecodeError(StatementError):
    """Raised when a numeric literal or its unit suffix cannot be decoded."""
