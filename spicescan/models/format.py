"""Defines supported netlist format types."""

from enum import Enum
from pathlib import Path

__all__ = ["NetlistFormat"]


class NetlistFormat(Enum):
    """Enumeration of supported netlist file formats and their file suffixes."""

    SPICE = (".sp", ".spi", ".spice", ".cir", ".net", ".ckt")

    @classmethod
    def from_path(cls, filepath: str | Path) -> "NetlistFormat":
        """
        Guesses the netlist format from a file suffix.

        :param filepath: Path to the netlist file.
        :return: Matching NetlistFormat, SPICE when the suffix is unknown.
        """
        suffix = Path(filepath).suffix.lower()
        for netlist_format in cls:
            if suffix in netlist_format.value:
                return netlist_format
        return cls.SPICE
