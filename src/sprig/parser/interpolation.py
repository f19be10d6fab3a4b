"""Interpolation parsing for the sprig parser.

Grammar::

    interp := '@' ( if | match | for | expr )
    if     := 'if' expr '{' group '}' ( 'else' 'if' expr '{' group '}' )*
              ( 'else' '{' group '}' )?
    match  := 'match' expr '{' ( pattern '=>' ( '{' group '}' | STRING ) ','? )* '}'
    for    := 'for' pattern 'in' expr '{' group '}'

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from sprig._types import Token, TokenType
from sprig.nodes import Group, InterpExpr, InterpFor, InterpIf, InterpMatch, Literal, MatchArm
from sprig.parser.host import BLOCK_STOP

if TYPE_CHECKING:
    from sprig.nodes import HostExpr, HostPattern, Interp
    from sprig.parser.errors import ParseError


class InterpolationParsingMixin:
    """Mixin for ``@`` interpolations and their control-flow forms."""

    # ─────────────────────────────────────────────────────────────────────────
    # Host attributes and cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # From TokenNavigationMixin
        @property
        def _current(self) -> Token: ...
        def _advance(self) -> Token: ...
        def _expect(self, token_type: TokenType) -> Token: ...
        def _match(self, *types: TokenType) -> bool: ...
        def _match_keyword(self, keyword: str, offset: int = 0) -> bool: ...
        def _unexpected(
            self,
            expected: Iterable[str],
            token: Token | None = None,
            suggestion: str | None = None,
        ) -> ParseError: ...

        # From HostParsingMixin
        def _text_literal(self, token: Token) -> str | None: ...
        def _parse_host_expr(self, stop: frozenset[TokenType]) -> HostExpr: ...
        def _parse_bare_expr(self) -> HostExpr | Literal: ...
        def _parse_for_target(self) -> HostPattern: ...
        def _parse_arm_pattern(self) -> HostPattern: ...

        # From Parser core
        def _parse_braced_group(self) -> Group: ...

    def _parse_interp(self) -> Interp:
        at = self._expect(TokenType.AT)
        if self._match_keyword("if"):
            return self._parse_if(at)
        if self._match_keyword("match"):
            return self._parse_match(at)
        if self._match_keyword("for"):
            return self._parse_for(at)
        return InterpExpr(at.lineno, at.col_offset, self._parse_bare_expr())

    def _parse_if(self, at: Token) -> InterpIf:
        """Parse ``@if``; ``else if`` chains flatten into ``elif_``."""
        self._advance()  # consume 'if'
        test = self._parse_host_expr(BLOCK_STOP)
        body = self._parse_braced_group()

        elif_: list[tuple[HostExpr, Group]] = []
        else_: Group | None = None
        while self._match_keyword("else"):
            self._advance()  # consume 'else'
            if self._match_keyword("if"):
                self._advance()  # consume 'if'
                cond = self._parse_host_expr(BLOCK_STOP)
                elif_.append((cond, self._parse_braced_group()))
                continue
            if not self._match(TokenType.LBRACE):
                raise self._unexpected({"`{`", "`if`"})
            else_ = self._parse_braced_group()
            break

        return InterpIf(at.lineno, at.col_offset, test, body, tuple(elif_), else_)

    def _parse_match(self, at: Token) -> InterpMatch:
        self._advance()  # consume 'match'
        subject = self._parse_host_expr(BLOCK_STOP)
        self._expect(TokenType.LBRACE)

        arms: list[MatchArm] = []
        while not self._match(TokenType.RBRACE):
            if self._match(TokenType.EOF):
                raise self._unexpected({"pattern", "`}`"})
            arms.append(self._parse_arm())
            if self._match(TokenType.COMMA):
                self._advance()
        self._advance()  # consume '}'

        return InterpMatch(at.lineno, at.col_offset, subject, tuple(arms))

    def _parse_arm(self) -> MatchArm:
        start = self._current
        pattern = self._parse_arm_pattern()
        self._expect(TokenType.FAT_ARROW)

        body: Group | Literal
        token = self._current
        if token.type is TokenType.LBRACE:
            body = self._parse_braced_group()
        else:
            text = self._text_literal(token)
            if text is None:
                raise self._unexpected({"`{`", "string literal"})
            self._advance()
            body = Literal(token.lineno, token.col_offset, text)

        return MatchArm(start.lineno, start.col_offset, pattern, body)

    def _parse_for(self, at: Token) -> InterpFor:
        self._advance()  # consume 'for'
        target = self._parse_for_target()
        self._advance()  # consume 'in'
        iterable = self._parse_host_expr(BLOCK_STOP)
        body = self._parse_braced_group()
        return InterpFor(at.lineno, at.col_offset, target, iterable, body)
