"""sprig lexer: template source text to a flat token list.

The DSL borrows its lexical rules from Python so that host expressions
(conditions, attribute values, loop targets, match patterns) can be written
inline and sliced back out of the source verbatim:

- identifiers and string literals follow Python's syntax (including
  ``r``/``u``/``b``/``f`` prefixes and triple quotes)
- ``#`` starts a comment that runs to the end of the line
- whitespace is insignificant

Every token records its line, column, and source offsets. The lexer never
tracks indentation, so templates can be laid out freely.

Example:
    >>> [t.value for t in tokenize('div[class="a"] { @x }')][:6]
    ['div', '[', 'class', '=', '"a"', ']']

"""

from __future__ import annotations

import re

from sprig._types import Token, TokenType
from sprig.environment.exceptions import ErrorCode, LexerError

_STRING_PREFIX = r"(?:[rRuUbBfF]|[rR][bBfF]|[bBfF][rR])?"

_PUNCTUATION: dict[str, TokenType] = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "=": TokenType.ASSIGN,
    "@": TokenType.AT,
    "=>": TokenType.FAT_ARROW,
}


class Lexer:
    """Split template source into tokens.

    Thread-Safety:
        Patterns are compiled once at class level and never mutated; each
        Lexer instance only holds per-call state.

    Example:
            >>> Lexer("br;").tokenize()
            [Token(NAME, 'br', 1:0), Token(SEMICOLON, ';', 1:2), Token(EOF, '', 1:3)]
    """

    __slots__ = ("_name", "_source")

    _TOKEN_RE = re.compile(
        rf"""
        (?P<ws>\s+)
        | (?P<comment>\#[^\n]*)
        | (?P<string>{_STRING_PREFIX}(?:
              '''(?:[^'\\]|\\[\s\S]|'(?!''))*'''
            | \"\"\"(?:[^"\\]|\\[\s\S]|"(?!""))*\"\"\"
            | '(?!'')(?:[^'\\\n]|\\[\s\S])*'
            | "(?!"")(?:[^"\\\n]|\\[\s\S])*"
          ))
        | (?P<number>
              0[xX][0-9a-fA-F_]+
            | 0[oO][0-7_]+
            | 0[bB][01_]+
            | (?:\d[\d_]*(?:\.[\d_]*)?|\.\d[\d_]*)(?:[eE][+-]?\d[\d_]*)?[jJ]?
          )
        | (?P<name>[^\W\d]\w*)
        | (?P<op>
              =>
            | \*\*= | //= | >>= | <<= | \.\.\.
            | -> | := | == | != | <= | >= | \*\* | // | << | >>
            | [-+*/%&|^@]=
            | [-+*/%&|^~<>.:!{{}}\[\]();,=@]
          )
        """,
        re.VERBOSE,
    )

    # An opening quote (optionally prefixed) that the string pattern rejected
    _STRING_START_RE = re.compile(rf"{_STRING_PREFIX}['\"]")

    def __init__(self, source: str, name: str | None = None):
        self._source = source
        self._name = name

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Raises:
            LexerError: On an unterminated string or a character that cannot
                start any token.
        """
        source = self._source
        tokens: list[Token] = []
        pos = 0
        lineno = 1
        line_start = 0
        size = len(source)

        while pos < size:
            match = self._TOKEN_RE.match(source, pos)
            if match is None:
                raise self._error_at(pos, lineno, pos - line_start)

            kind = match.lastgroup
            text = match.group()
            end = match.end()

            if kind not in ("ws", "comment"):
                tokens.append(
                    Token(
                        type=self._token_type(kind, text),
                        value=text,
                        lineno=lineno,
                        col_offset=pos - line_start,
                        start=pos,
                        end=end,
                    )
                )

            newlines = text.count("\n")
            if newlines:
                lineno += newlines
                line_start = pos + text.rfind("\n") + 1
            pos = end

        tokens.append(Token(TokenType.EOF, "", lineno, pos - line_start, pos, pos))
        return tokens

    @staticmethod
    def _token_type(kind: str | None, text: str) -> TokenType:
        if kind == "string":
            return TokenType.STRING
        if kind == "number":
            return TokenType.NUMBER
        if kind == "name":
            return TokenType.NAME
        return _PUNCTUATION.get(text, TokenType.OPERATOR)

    def _error_at(self, pos: int, lineno: int, col: int) -> LexerError:
        if self._STRING_START_RE.match(self._source, pos):
            return LexerError(
                "unterminated string literal",
                code=ErrorCode.UNTERMINATED_STRING,
                lineno=lineno,
                col_offset=col,
                name=self._name,
                source=self._source,
                suggestion="Close the string with the same quote it was opened with",
            )
        return LexerError(
            f"unexpected character {self._source[pos]!r}",
            lineno=lineno,
            col_offset=col,
            name=self._name,
            source=self._source,
        )


def tokenize(source: str, name: str | None = None) -> list[Token]:
    """Tokenize template source (convenience wrapper around Lexer)."""
    return Lexer(source, name).tokenize()
