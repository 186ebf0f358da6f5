"""Defines the netlist data structures produced by the parser.

Provides the component, model and command records assembled from a SPICE
source, together with the Netlist aggregate that owns them.
"""

import abc
import functools
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

__all__ = ["ComponentType", "Component", "Model", "Command", "Netlist"]


class _WritableMixin(abc.ABC):
    @abc.abstractmethod
    def write(self, stream: TextIO, indent: int = 0):
        """write the content of self in a meaningful way"""

    @staticmethod
    def _format_with_indent(indent: int, value: str):
        return f"{' '*indent*4}{value}"

    @staticmethod
    def _format_params(params: dict) -> str:
        return ", ".join(f"{k}={v:g}" if isinstance(v, float) else f"{k}={v}" for k, v in params.items())


class ComponentType(Enum):
    """
    Enumeration of supported component types.

    Each member carries its designator prefix and the number of nodes
    an instance of that type connects to.
    """

    RESISTOR = ("R", 2)
    CAPACITOR = ("C", 2)
    INDUCTOR = ("L", 2)
    FOUR_TERMINAL = ("M", 4)

    def __init__(self, prefix: str, arity: int):
        self.prefix = prefix
        self.arity = arity

    @property
    def is_passive(self) -> bool:
        return self is not ComponentType.FOUR_TERMINAL

    @classmethod
    def from_prefix(cls, instance_prefix: str) -> "ComponentType":
        """
        Maps an instance designator prefix to a component type.

        :param instance_prefix: Designator's first character, any case.
        :return: Matching ComponentType.
        :raises ValueError: If the prefix does not name a supported type.
        """
        return _type_from_prefix(instance_prefix.upper())


@functools.lru_cache(maxsize=None)
def _type_from_prefix(prefix: str) -> ComponentType:
    for component_type in ComponentType:
        if component_type.prefix == prefix:
            return component_type
    raise ValueError(f"Instance prefix '{prefix}' does not map to a supported component type.")


@dataclass(slots=True)
class Component(_WritableMixin):
    """
    Represents a component instance line.

    :param name: Designator as written (e.g., 'R1', 'M3').
    :param type: Component type selected by the designator prefix.
    :param nodes: Ordered node identifiers; length equals ``type.arity``.
    :param model: Referenced model name (four-terminal devices only).
    :param params: Numeric parameters (e.g., 'value' for passives, W/L for devices).
    :param line_number: Source line the component was parsed from.
    """

    name: str
    type: ComponentType
    nodes: list[str] = field(default_factory=list)
    model: str | None = None
    params: dict[str, float] = field(default_factory=dict)
    line_number: int = 0

    def __post_init__(self):
        if len(self.nodes) != self.type.arity:
            raise ValueError(
                f"{self.type.name.lower()} '{self.name}' needs {self.type.arity} nodes, got {len(self.nodes)}"
            )

    def to_dict(self) -> dict:
        data = {"name": self.name, "type": self.type.prefix, "nodes": list(self.nodes)}
        if self.model:
            data["model"] = self.model
        data["params"] = dict(self.params)
        return data

    def write(self, stream: TextIO, indent: int = 0):
        value = f"{self.type.name.capitalize()}: {self.name} (line {self.line_number})\n"
        stream.write(self._format_with_indent(indent=indent, value=value))
        stream.write(self._format_with_indent(indent=indent + 1, value=f"Nodes: {' '.join(self.nodes)}\n"))
        if self.model:
            stream.write(self._format_with_indent(indent=indent + 1, value=f"Model: {self.model}\n"))
        if self.params:
            stream.write(self._format_with_indent(indent=indent + 1, value=self._format_params(self.params) + "\n"))


@dataclass(slots=True)
class Model(_WritableMixin):
    """
    Represents a .model directive.

    Example: .model my_nmos nmos vto=0.7 kp=110u
    name: "my_nmos"
    type: "nmos"
    params: {"vto": 0.7, "kp": 0.00011}
    """

    name: str
    type: str
    params: dict[str, float] = field(default_factory=dict)
    line_number: int = 0

    def to_dict(self) -> dict:
        return {"name": self.name, "type": self.type, "params": dict(self.params)}

    def write(self, stream: TextIO, indent: int = 0):
        stream.write(self._format_with_indent(indent=indent, value=f"Model: {self.name}\n"))
        value = f"Type: {self.type}\nParams: {self._format_params(self.params)}\n"
        for line in value.splitlines(keepends=True):
            stream.write(self._format_with_indent(indent=indent + 1, value=line))


@dataclass(slots=True)
class Command(_WritableMixin):
    """
    Represents a simulation directive such as '.tran' or '.op'.

    Option values are kept as raw strings; only TRAN, AC and DC populate them.
    """

    type: str
    options: dict[str, str] = field(default_factory=dict)
    line_number: int = 0

    def to_dict(self) -> dict:
        return {"type": self.type, "options": dict(self.options)}

    def write(self, stream: TextIO, indent: int = 0):
        value = f"Command: {self.type}"
        if self.options:
            value += f" ({self._format_params(self.options)})"
        stream.write(self._format_with_indent(indent=indent, value=value + "\n"))


@dataclass(slots=True)
class Netlist(_WritableMixin):
    """
    Complete structured description of a parsed circuit.

    :param title: Body of the first comment line in the source.
    :param components: Component instances.
    :param commands: Simulation directives.
    :param models: Model cards keyed by name.
    """

    title: str = ""
    components: list[Component] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    models: dict[str, Model] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "components": [component.to_dict() for component in self.components],
            "commands": [command.to_dict() for command in self.commands],
            "models": {name: model.to_dict() for name, model in self.models.items()},
        }

    def write(self, stream: TextIO, indent: int = 0):
        stream.write(self._format_with_indent(indent=indent, value=f"Netlist: {self.title}\n"))
        stream.write(self._format_with_indent(indent=indent, value="Components:\n"))
        for component in self.components:
            component.write(stream=stream, indent=indent + 1)
        stream.write(self._format_with_indent(indent=indent, value="Models:\n"))
        for model in self.models.values():
            model.write(stream=stream, indent=indent + 1)
        stream.write(self._format_with_indent(indent=indent, value="Commands:\n"))
        for command in self.commands:
            command.write(stream=stream, indent=indent + 1)
