import pytest

from spicescan.ingestor.tokenizer import tokenize
from spicescan.models.parsing import StatementKind


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_blank_lines_are_skipped(line):
    assert tokenize(1, line) is None


def test_comment_strips_marker_and_whitespace():
    statement = tokenize(3, "  * My Circuit  ")
    assert statement.kind is StatementKind.COMMENT
    assert statement.text == "My Circuit"
    assert statement.line_number == 3


def test_comment_without_space():
    assert tokenize(1, "*Title").text == "Title"


def test_empty_comment():
    statement = tokenize(1, "*")
    assert statement.kind is StatementKind.COMMENT
    assert statement.text == ""


@pytest.mark.parametrize("line", [".model nch nmos", ".MODEL nch nmos vto=1", ".Model", "  .model a b"])
def test_model_cards(line):
    assert tokenize(1, line).kind is StatementKind.MODEL_CARD


@pytest.mark.parametrize("line", [".tran tstep=1n", ".op", ".modelx a b", ".end", "."])
def test_directives(line):
    assert tokenize(1, line).kind is StatementKind.DIRECTIVE


def test_instance_tokens():
    statement = tokenize(7, "R1   in\tout 1K ")
    assert statement.kind is StatementKind.INSTANCE
    assert statement.tokens == ("R1", "in", "out", "1K")
    assert statement.text == "R1   in\tout 1K"


def test_anything_else_is_an_instance():
    assert tokenize(1, "Q1 c b e").kind is StatementKind.INSTANCE
    assert tokenize(1, "1abc").kind is StatementKind.INSTANCE
