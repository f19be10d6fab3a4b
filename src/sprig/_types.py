"""Token types shared by the lexer and parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of token produced by the sprig lexer.

    Keywords (``if``, ``else``, ``match``, ``for``, ``in``) are plain NAME
    tokens; the parser recognizes them by value.
    """

    NAME = "name"
    STRING = "string"
    NUMBER = "number"

    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    LPAREN = "("
    RPAREN = ")"
    SEMICOLON = ";"
    COMMA = ","
    ASSIGN = "="
    AT = "@"
    FAT_ARROW = "=>"

    # Any other Python operator (host expressions only)
    OPERATOR = "operator"

    EOF = "eof"


# Opening bracket -> closing bracket
BRACKET_PAIRS: dict[TokenType, TokenType] = {
    TokenType.LBRACE: TokenType.RBRACE,
    TokenType.LBRACKET: TokenType.RBRACKET,
    TokenType.LPAREN: TokenType.RPAREN,
}

OPENING_BRACKETS = frozenset(BRACKET_PAIRS)
CLOSING_BRACKETS = frozenset(BRACKET_PAIRS.values())


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical token.

    Attributes:
        type: Token kind
        value: Exact source text of the token
        lineno: 1-based line number
        col_offset: 0-based column of the first character
        start: Offset of the first character in the source
        end: Offset one past the last character
    """

    type: TokenType
    value: str
    lineno: int
    col_offset: int
    start: int = 0
    end: int = 0

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        if self.type is TokenType.EOF:
            return "end of template"
        if self.type is TokenType.STRING:
            return f"string literal {self.value}"
        if self.type is TokenType.NAME:
            return f"identifier `{self.value}`"
        return f"`{self.value}`"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.lineno}:{self.col_offset})"
