from spicescan.ingestor.factory import parse_lines
from spicescan.ingestor.validator import model_references, undefined_references, validate
from spicescan.models.netlist import Component, ComponentType, Model, Netlist
from spicescan.models.parsing import ParseError, ParseResult, Severity


def _undefined_errors(result):
    return [
        (error.line_number, error.message)
        for error in result.errors
        if error.message.startswith("undefined model")
    ]


def test_undefined_model_reported_at_component_line():
    result = parse_lines(["* amp", "R1 a b 1K", "M1 d g s b nch"])
    assert _undefined_errors(result) == [(3, "undefined model: nch")]
    assert result.errors[-1].severity is Severity.ERROR


def test_defined_model_resolves_regardless_of_position():
    result = parse_lines(["M1 d g s b nch", ".model nch nmos vto=0.7"])
    assert result.errors == []


def test_each_referencing_component_reported():
    result = parse_lines(["M1 d g s b nch", "R1 a b 1K", "M2 d g s b nch", "M3 d g s b pch", ".model pch pmos"])
    assert _undefined_errors(result) == [(1, "undefined model: nch"), (3, "undefined model: nch")]


def test_model_names_are_case_sensitive():
    result = parse_lines(["M1 d g s b NCH", ".model nch nmos"])
    assert _undefined_errors(result) == [(1, "undefined model: NCH")]


def test_validate_appends_to_existing_errors():
    netlist = Netlist(
        components=[Component(name="M1", type=ComponentType.FOUR_TERMINAL, nodes=["d", "g", "s", "b"], model="x", line_number=4)]
    )
    existing = ParseError(line_number=1, message="unsupported component type: Q")
    result = ParseResult(filepath="<test>", netlist=netlist, errors=[existing])

    added = validate(result)

    assert [error.message for error in added] == ["undefined model: x"]
    assert result.errors == [existing, *added]


def test_reference_graph():
    netlist = Netlist(
        components=[
            Component(name="M1", type=ComponentType.FOUR_TERMINAL, nodes=["d", "g", "s", "b"], model="nch"),
            Component(name="M2", type=ComponentType.FOUR_TERMINAL, nodes=["d", "g", "s", "b"], model="pch"),
            Component(name="R1", type=ComponentType.RESISTOR, nodes=["a", "b"], params={"value": 1.0}),
        ],
        models={"nch": Model(name="nch", type="nmos"), "unused": Model(name="unused", type="pmos")},
    )
    graph = model_references(netlist)

    assert graph.number_of_edges() == 2
    assert graph.nodes[("model", "unused")]["defined"] is True
    assert graph.in_degree(("model", "unused")) == 0
    undefined = undefined_references(graph)
    assert list(undefined) == ["pch"]
    assert [component.name for component in undefined["pch"]] == ["M2"]
