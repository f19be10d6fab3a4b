"""Token navigation for the sprig parser.

Provides the cursor primitives every other parser mixin builds on.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from sprig._types import Token, TokenType
from sprig.parser.errors import ParseError

if TYPE_CHECKING:
    from sprig.environment.exceptions import ErrorCode


def describe_type(token_type: TokenType) -> str:
    """Expected-set description for a punctuation token type: ``{`` -> `` `{` ``."""
    if token_type is TokenType.NAME:
        return "identifier"
    if token_type is TokenType.STRING:
        return "string literal"
    if token_type is TokenType.EOF:
        return "end of template"
    return f"`{token_type.value}`"


class TokenNavigationMixin:
    """Cursor over the token list produced by the lexer.

    The token list always ends with an EOF token, so ``_current`` is always
    valid and ``_advance`` never moves past the end.
    """

    # ─────────────────────────────────────────────────────────────────────────
    # Host attributes (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        _tokens: Sequence[Token]
        _pos: int
        _name: str | None
        _source: str | None

    @property
    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _peek(self, offset: int = 1) -> Token:
        index = min(self._pos + offset, len(self._tokens) - 1)
        return self._tokens[index]

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        if token.type is not TokenType.EOF:
            self._pos += 1
        return token

    def _match(self, *types: TokenType) -> bool:
        return self._current.type in types

    def _match_keyword(self, keyword: str, offset: int = 0) -> bool:
        token = self._peek(offset) if offset else self._current
        return token.type is TokenType.NAME and token.value == keyword

    def _expect(self, token_type: TokenType) -> Token:
        if self._current.type is not token_type:
            raise self._unexpected({describe_type(token_type)})
        return self._advance()

    def _error(
        self,
        message: str,
        token: Token | None = None,
        suggestion: str | None = None,
        code: ErrorCode | None = None,
    ) -> ParseError:
        return ParseError(
            message,
            token or self._current,
            name=self._name,
            source=self._source,
            suggestion=suggestion,
            code=code,
        )

    def _unexpected(
        self,
        expected: Iterable[str],
        token: Token | None = None,
        suggestion: str | None = None,
    ) -> ParseError:
        return ParseError.unexpected(
            token or self._current,
            expected,
            name=self._name,
            source=self._source,
            suggestion=suggestion,
        )
