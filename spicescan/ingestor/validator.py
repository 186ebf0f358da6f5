"""
Resolves component model references after parsing.

Builds a directed reference graph from components to the models they name
and reports every reference that does not resolve to a defined model. Runs
single-threaded once the concurrent phase has finished.
"""

import logging

import networkx as nx

from spicescan.models.netlist import Netlist
from spicescan.models.parsing import ParseError, ParseResult, Severity

__all__ = ["validate", "model_references", "undefined_references"]

logger = logging.getLogger(__name__)

_COMPONENT = "component"
_MODEL = "model"


def _model_node(name: str) -> tuple[str, str]:
    return (_MODEL, name)


def model_references(netlist: Netlist) -> nx.DiGraph:
    """
    Builds the directed graph of model references.

    Component nodes are keyed by list position; model nodes by name. Model
    nodes carry ``defined=True`` when the netlist has a card for them.

    :param netlist: Parsed netlist.
    :return: NetworkX directed graph with component -> model edges.
    """
    graph: nx.DiGraph = nx.DiGraph()
    for name, model in netlist.models.items():
        graph.add_node(_model_node(name), kind=_MODEL, defined=True, line_number=model.line_number)
    for index, component in enumerate(netlist.components):
        if not component.model:
            continue
        node = (_COMPONENT, index)
        graph.add_node(node, kind=_COMPONENT, component=component)
        target = _model_node(component.model)
        if target not in graph:
            graph.add_node(target, kind=_MODEL, defined=False)
        graph.add_edge(node, target)
    return graph


def undefined_references(graph: nx.DiGraph) -> dict[str, list]:
    """
    Collects components referencing models that are not defined.

    :param graph: Graph from ``model_references``.
    :return: Mapping of undefined model name to the referencing components.
    """
    undefined = {}
    for node, data in graph.nodes(data=True):
        if data["kind"] == _MODEL and not data["defined"]:
            components = [graph.nodes[source]["component"] for source in graph.predecessors(node)]
            undefined[node[1]] = sorted(components, key=lambda component: component.line_number)
    return undefined


def validate(result: ParseResult) -> list[ParseError]:
    """
    Checks that every model reference resolves.

    New diagnostics are appended directly to ``result.errors``.

    :param result: Fully assembled parse result.
    :return: The diagnostics added by this pass.
    """
    graph = model_references(result.netlist)
    issues = []
    for name, components in undefined_references(graph).items():
        for component in components:
            issues.append(
                ParseError(
                    line_number=component.line_number,
                    message=f"undefined model: {name}",
                    severity=Severity.ERROR,
                )
            )
    issues.sort(key=lambda issue: issue.sort_key)
    result.errors.extend(issues)

    if issues:
        logger.info("Validation found %d undefined model reference(s) in %s", len(issues), result.filepath)
    else:
        logger.debug("Validation complete with no issues found in %s", result.filepath)
    return issues
