import pytest

from spicescan.config import ParserConfig
from spicescan.ingestor.spice import SpiceLineParser
from spicescan.ingestor.tokenizer import tokenize

SAMPLE_NETLIST = """\
* RC ladder with a driver
R1 in mid 1K
C1 mid 0 10n

L1 mid out 2.2u
M1 out in 0 0 nch W=1u L=100n
M2 out in vdd vdd pch
.model nch nmos vto=0.7 kp=110u
.tran tstep=1n tstop=1u
.op
Q1 c b e
R2 a b 10k
* a later comment
.end
"""


@pytest.fixture
def sample_lines():
    return SAMPLE_NETLIST.splitlines()


@pytest.fixture
def write_netlist(tmp_path):
    """Returns a helper writing netlist text to a file under tmp_path."""

    def _write(text: str, name: str = "circuit.sp"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def parse_line():
    """Returns a helper parsing a single line with a fresh SpiceLineParser."""

    def _parse(line: str, config: ParserConfig | None = None, line_number: int = 1):
        statement = tokenize(line_number, line)
        assert statement is not None
        return SpiceLineParser(config or ParserConfig()).parse(statement)

    return _parse
