"""
Classifies stripped source lines into statement kinds.

The tokenizer is the only lexical boundary shared by the grammars: it splits
on whitespace and tags the line, and the line parser dispatches on the tag.
"""

from spicescan.models.parsing import Statement, StatementKind

__all__ = ["COMMENT_CHAR", "DIRECTIVE_CHAR", "MODEL_KEYWORD", "tokenize"]

COMMENT_CHAR = "*"
DIRECTIVE_CHAR = "."
MODEL_KEYWORD = ".model"


def tokenize(line_number: int, raw: str) -> Statement | None:
    """
    Tokenizes and classifies a single physical line.

    :param line_number: 1-indexed line number of the line.
    :param raw: Line content as read from the source.
    :return: Classified Statement, or None for blank lines.
    """
    line = raw.strip()
    if not line:
        return None

    if line.startswith(COMMENT_CHAR):
        body = line[len(COMMENT_CHAR):].strip()
        return Statement(line_number=line_number, kind=StatementKind.COMMENT, tokens=tuple(body.split()), text=body)

    tokens = tuple(line.split())
    if tokens[0].lower() == MODEL_KEYWORD:
        kind = StatementKind.MODEL_CARD
    elif line.startswith(DIRECTIVE_CHAR):
        kind = StatementKind.DIRECTIVE
    else:
        kind = StatementKind.INSTANCE
    return Statement(line_number=line_number, kind=kind, tokens=tokens, text=line)
