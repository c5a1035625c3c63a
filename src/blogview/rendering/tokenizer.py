"""Tokenize source text into lines of categorised tokens.

Lexing is delegated to Pygments. Pygments token types are mapped onto the
small category vocabulary the theme table is keyed by (``keyword``,
``string``, ``comment``, ...). Anything unmapped is ``plain``.
"""

from functools import lru_cache
from typing import NamedTuple

from pygments.lexers import get_lexer_by_name
from pygments.token import (
    Comment,
    Generic,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    _TokenType,
)
from pygments.util import ClassNotFound

from blogview.models.theme import PLAIN


class Token(NamedTuple):
    """One highlighted run of text."""

    content: str
    category: str


Line = tuple[Token, ...]

# Most specific Pygments types first; lookup walks up the type hierarchy.
CATEGORY_MAP: dict[_TokenType, str] = {
    Comment.Preproc: "prolog",
    Comment.PreprocFile: "prolog",
    Comment: "comment",
    Keyword.Constant: "boolean",
    Keyword.Namespace: "keyword",
    Keyword: "keyword",
    Name.Builtin: "builtin",
    Name.Builtin.Pseudo: "builtin",
    Name.Function: "function",
    Name.Function.Magic: "function",
    Name.Decorator: "function",
    Name.Class: "class-name",
    Name.Namespace: "namespace",
    Name.Tag: "tag",
    Name.Attribute: "attr-name",
    Name.Variable: "variable",
    Name.Constant: "constant",
    Name.Entity: "entity",
    Name.Property: "property",
    Name.Label: "atrule-id",
    String.Regex: "regex",
    String.Affix: "string",
    String: "string",
    Number: "number",
    Operator.Word: "keyword",
    Operator: "operator",
    Punctuation: "punctuation",
    Generic.Deleted: "deleted",
    Generic.Inserted: "inserted",
    Generic.Emph: "italic",
    Generic.Strong: "bold",
    Generic.Error: "important",
}


def category_for(token_type: _TokenType) -> str:
    """Map a Pygments token type to a theme category."""
    while token_type is not None:
        category = CATEGORY_MAP.get(token_type)
        if category is not None:
            return category
        token_type = token_type.parent
    return PLAIN


@lru_cache(maxsize=512)
def tokenize(text: str, language: str) -> tuple[Line, ...]:
    """Tokenize ``text`` as ``language``, grouped by source line.

    Pure: identical inputs give identical (cached) output. An unknown
    language yields one ``plain`` token per line. Empty lines are a single
    empty ``plain`` token so every line renders.

    Args:
        text: Source code
        language: Pygments language name or alias (case-insensitive)

    Returns:
        Tuple of lines, each a tuple of Token(content, category)
    """
    text = text.rstrip("\n")

    try:
        lexer = get_lexer_by_name(language.lower(), stripnl=False, ensurenl=False)
    except ClassNotFound:
        return tuple((Token(line, PLAIN),) for line in text.split("\n"))

    lines: list[list[Token]] = [[]]
    for token_type, value in lexer.get_tokens(text):
        category = category_for(token_type)
        pieces = value.split("\n")
        for i, piece in enumerate(pieces):
            if i > 0:
                lines.append([])
            if piece:
                _append(lines[-1], Token(piece, category))

    return tuple(tuple(line) if line else (Token("", PLAIN),) for line in lines)


def _append(line: list[Token], token: Token) -> None:
    # Adjacent runs of one category are merged
    if line and line[-1].category == token.category:
        line[-1] = Token(line[-1].content + token.content, token.category)
    else:
        line.append(token)
