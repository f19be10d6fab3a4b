"""Host fragment scanning for the sprig parser.

Host expressions and patterns are Python source embedded in the template.
The parser does not understand Python; it finds where a fragment ends by
walking tokens with bracket balancing until a terminator appears at
nesting depth zero, then asks Python's own parser whether the slice is
valid (see ``sprig.utils.host``).

Terminators by context::

    @expr                 { } ; , ] ) @ =>   (longest valid prefix wins)
    [name=expr]           , ]
    @if / @match / @for   {                  (condition, subject, iterable)
    @for target           in
    match arm pattern     =>

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import ast
import warnings
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, cast

from sprig._types import BRACKET_PAIRS, CLOSING_BRACKETS, OPENING_BRACKETS, Token, TokenType
from sprig.environment.exceptions import ErrorCode
from sprig.nodes import BoolLiteral, HostExpr, HostPattern, Literal
from sprig.parser.tokens import describe_type
from sprig.utils.host import parse_case, parse_expression, parse_target

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sprig.parser.errors import ParseError

# Terminators for a bare ``@expr`` interpolation
BARE_STOP = frozenset(
    {
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.SEMICOLON,
        TokenType.COMMA,
        TokenType.RBRACKET,
        TokenType.RPAREN,
        TokenType.AT,
        TokenType.FAT_ARROW,
    }
)

ATTR_STOP = frozenset({TokenType.COMMA, TokenType.RBRACKET})
BLOCK_STOP = frozenset({TokenType.LBRACE})
ARM_STOP = frozenset({TokenType.FAT_ARROW})

BOOL_WORDS = {"true": True, "false": False, "True": True, "False": False}


def is_text_string(token: Token) -> bool:
    """True for a plain string literal.

    Byte strings and f-strings are host expressions, not text.
    """
    if token.type is not TokenType.STRING:
        return False
    quote = min(i for i in (token.value.find('"'), token.value.find("'")) if i >= 0)
    prefix = token.value[:quote].lower()
    return "b" not in prefix and "f" not in prefix


class HostParsingMixin:
    """Mixin that slices host fragments out of the token stream."""

    # ─────────────────────────────────────────────────────────────────────────
    # Host attributes and cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        _tokens: Sequence[Token]
        _pos: int
        _source: str | None

        @property
        def _current(self) -> Token: ...
        def _error(
            self,
            message: str,
            token: Token | None = None,
            suggestion: str | None = None,
            code: ErrorCode | None = None,
        ) -> ParseError: ...
        def _unexpected(
            self,
            expected: Iterable[str],
            token: Token | None = None,
            suggestion: str | None = None,
        ) -> ParseError: ...

    def _text_literal(self, token: Token) -> str | None:
        """Decoded text of a plain string token, or None for any other token.

        Raises:
            ParseError: If the literal holds an escape Python cannot decode,
                such as ``\\x4`` or an unknown ``\\N{...}`` name.
        """
        if not is_text_string(token):
            return None
        try:
            # Unknown escapes like \d decode as themselves, without a warning
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", SyntaxWarning)
                value = ast.literal_eval(token.value)
        except (SyntaxError, ValueError) as e:
            reason = getattr(e, "msg", None) or str(e)
            raise self._error(
                f"invalid string literal {token.value}: {reason}",
                token,
                code=ErrorCode.INVALID_STRING,
            ) from None
        return cast(str, value)

    def _scan_host(self, stop: frozenset[TokenType], keyword: str | None = None) -> list[int]:
        """Scan a fragment starting at the current token without consuming it.

        Returns every index at which the fragment could end with all brackets
        balanced, in increasing order. The last entry is where the scan
        stopped. An empty list means the fragment is empty.

        A closing bracket with nothing open also ends the fragment, so
        ``p { @x }`` stops before the ``}``. When ``keyword`` is given, that
        identifier at depth zero ends the fragment as well.

        Raises:
            ParseError: On a mismatched closing bracket or an unclosed
                bracket at end of template.
        """
        tokens = self._tokens
        closers: list[TokenType] = []
        cuts: list[int] = []
        i = self._pos
        while True:
            token = tokens[i]
            kind = token.type
            if kind is TokenType.EOF:
                if closers:
                    raise self._unexpected({describe_type(closers[-1])}, token=token)
                return cuts
            if not closers and (
                kind in stop
                or kind in CLOSING_BRACKETS
                or (kind is TokenType.NAME and token.value == keyword)
            ):
                return cuts
            if kind in OPENING_BRACKETS:
                closers.append(BRACKET_PAIRS[kind])
            elif kind in CLOSING_BRACKETS:
                if kind is not closers[-1]:
                    raise self._unexpected({describe_type(closers[-1])}, token=token)
                closers.pop()
            i += 1
            if not closers:
                cuts.append(i)

    def _host_text(self, start: int, end: int) -> str:
        """Verbatim source between the first and last token of a fragment."""
        tokens = self._tokens
        if self._source is None:
            return " ".join(t.value for t in tokens[start:end])
        return self._source[tokens[start].start : tokens[end - 1].end]

    def _check(
        self,
        parse: Callable[[str], object],
        text: str,
        token: Token,
        what: str,
        code: ErrorCode,
    ) -> None:
        try:
            parse(text)
        except (SyntaxError, ValueError) as e:
            reason = getattr(e, "msg", None) or str(e)
            raise self._error(f"invalid {what} `{text}`: {reason}", token, code=code) from None

    def _parse_host_expr(self, stop: frozenset[TokenType]) -> HostExpr:
        """Parse a delimited host expression (condition, iterable, subject)."""
        first = self._current
        cuts = self._scan_host(stop)
        if not cuts:
            raise self._unexpected({"expression"})
        text = self._host_text(self._pos, cuts[-1])
        self._check(parse_expression, text, first, "expression", ErrorCode.INVALID_EXPRESSION)
        self._pos = cuts[-1]
        return HostExpr(first.lineno, first.col_offset, text)

    def _parse_attr_value(self) -> Literal | BoolLiteral | HostExpr:
        """Parse an attribute value up to ``,`` or ``]``."""
        first = self._current
        cuts = self._scan_host(ATTR_STOP)
        if not cuts:
            raise self._unexpected({"expression"})
        if cuts[-1] == self._pos + 1:
            text = self._text_literal(first)
            if text is not None:
                self._pos += 1
                return Literal(first.lineno, first.col_offset, text)
            if first.type is TokenType.NAME and first.value in BOOL_WORDS:
                self._pos += 1
                return BoolLiteral(first.lineno, first.col_offset, BOOL_WORDS[first.value])
        return self._parse_host_expr(ATTR_STOP)

    def _parse_bare_expr(self) -> HostExpr | Literal:
        """Parse the expression of a bare ``@expr`` interpolation.

        The expression runs as far as Python accepts it: ``@user.name p {}``
        takes ``user.name`` and leaves ``p {}`` as template content.
        """
        first = self._current
        start = self._pos
        cuts = self._scan_host(BARE_STOP)
        if not cuts:
            raise self._unexpected({"expression"})

        error: SyntaxError | ValueError | None = None
        for end in reversed(cuts):
            try:
                parse_expression(self._host_text(start, end))
            except (SyntaxError, ValueError) as e:
                error = e
                continue
            break
        else:
            # Nothing parses; report the shortest candidate
            reason = getattr(error, "msg", None) or str(error)
            raise self._error(
                f"invalid expression `{self._host_text(start, cuts[0])}`: {reason}",
                first,
                code=ErrorCode.INVALID_EXPRESSION,
            )

        if end == start + 1:
            text = self._text_literal(first)
            if text is not None:
                self._pos = end
                return Literal(first.lineno, first.col_offset, text)

        self._pos = end
        return HostExpr(first.lineno, first.col_offset, self._host_text(start, end))

    def _parse_for_target(self) -> HostPattern:
        """Parse a loop target up to the ``in`` keyword."""
        first = self._current
        cuts = self._scan_host(BLOCK_STOP, keyword="in")
        if not cuts:
            raise self._unexpected({"pattern"})
        end = cuts[-1]
        stopped_at = self._tokens[end]
        if not (stopped_at.type is TokenType.NAME and stopped_at.value == "in"):
            raise self._unexpected({"`in`"}, token=stopped_at)
        text = self._host_text(self._pos, end)
        self._check(parse_target, text, first, "loop target", ErrorCode.INVALID_PATTERN)
        self._pos = end
        return HostPattern(first.lineno, first.col_offset, text)

    def _parse_arm_pattern(self) -> HostPattern:
        """Parse a match arm pattern (with optional guard) up to ``=>``."""
        first = self._current
        cuts = self._scan_host(ARM_STOP)
        if not cuts:
            raise self._unexpected({"pattern"})
        text = self._host_text(self._pos, cuts[-1])
        self._check(parse_case, text, first, "pattern", ErrorCode.INVALID_PATTERN)
        self._pos = cuts[-1]
        return HostPattern(first.lineno, first.col_offset, text)
