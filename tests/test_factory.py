import pytest

from spicescan import NetlistFormat, NetlistSourceError, ParserConfig, get_netlist
from spicescan.ingestor.factory import get_line_parser_factory
from spicescan.ingestor.spice import SpiceLineParserFactory


def test_get_netlist_from_file(write_netlist, sample_lines):
    path = write_netlist("\n".join(sample_lines) + "\n")
    result = get_netlist(path, config=ParserConfig(num_workers=2))

    assert result.filepath == str(path)
    assert result.netlist.title == "RC ladder with a driver"
    assert len(result.netlist.components) == 5
    assert len(result.errors) == 3


def test_crlf_line_endings(write_netlist):
    path = write_netlist("* title\r\nR1 a b 1K\r\n")
    result = get_netlist(path)
    assert result.netlist.title == "title"
    assert result.netlist.components[0].params == {"value": 1000.0}


def test_invalid_utf8_is_replaced_not_dropped(tmp_path):
    path = tmp_path / "corrupt.sp"
    path.write_bytes(b"R1 n\xff1 0 1K\n")
    component = get_netlist(path).netlist.components[0]
    assert component.nodes == ["n\ufffd1", "0"]


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(NetlistSourceError) as excinfo:
        get_netlist(tmp_path / "missing.sp")
    assert "missing.sp" in str(excinfo.value)


def test_directory_is_fatal(tmp_path):
    with pytest.raises(NetlistSourceError):
        get_netlist(tmp_path)


def test_empty_file(write_netlist):
    result = get_netlist(write_netlist(""))
    assert result.netlist.to_dict() == {"title": "", "components": [], "commands": [], "models": {}}
    assert result.errors == []


def test_file_with_no_valid_statements(write_netlist):
    result = get_netlist(write_netlist("\n\n   \n"))
    assert result.netlist.components == []
    assert result.errors == []


@pytest.mark.parametrize("name", ["a.sp", "b.CIR", "c.spice", "d.txt", "noext"])
def test_format_from_path(name):
    assert NetlistFormat.from_path(name) is NetlistFormat.SPICE


def test_line_parser_factory():
    assert isinstance(get_line_parser_factory(NetlistFormat.SPICE), SpiceLineParserFactory)
    with pytest.raises(ValueError, match="Unsupported netlist format"):
        get_line_parser_factory("verilog")
