"""Element parsing for the sprig parser.

Grammar::

    element := name attrs? ( '{' group '}' | ';' )
    attrs   := '[' ( attr ( ',' attr )* ','? )? ']'
    attr    := name ( '=' value )?
    name    := IDENTIFIER | STRING

A name only starts an element when it is followed by ``[``, ``{`` or ``;``.
Otherwise it is literal text: ``p { hello }`` renders ``<p>hello</p>``.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from sprig._types import Token, TokenType
from sprig.nodes import Attr, Element, Group, Literal, Name, Normal, Void
from sprig.parser.host import is_text_string

if TYPE_CHECKING:
    from sprig.nodes import BoolLiteral, HostExpr
    from sprig.parser.errors import ParseError

# Tokens that commit a name to being an element
_ELEMENT_FOLLOW = frozenset({TokenType.LBRACKET, TokenType.LBRACE, TokenType.SEMICOLON})


class ElementParsingMixin:
    """Mixin for parsing elements, attributes and literal text."""

    # ─────────────────────────────────────────────────────────────────────────
    # Host attributes and cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        _tokens: Sequence[Token]
        _pos: int

        # From TokenNavigationMixin
        @property
        def _current(self) -> Token: ...
        def _peek(self, offset: int = 1) -> Token: ...
        def _advance(self) -> Token: ...
        def _expect(self, token_type: TokenType) -> Token: ...
        def _match(self, *types: TokenType) -> bool: ...
        def _unexpected(
            self,
            expected: Iterable[str],
            token: Token | None = None,
            suggestion: str | None = None,
        ) -> ParseError: ...

        # From HostParsingMixin
        def _text_literal(self, token: Token) -> str | None: ...
        def _parse_attr_value(self) -> Literal | BoolLiteral | HostExpr: ...

        # From Parser core
        def _parse_braced_group(self) -> Group: ...

    def _is_name_token(self, token: Token) -> bool:
        return token.type is TokenType.NAME or is_text_string(token)

    def _starts_element(self) -> bool:
        """True if the name at the cursor opens an element rather than text."""
        return self._peek().type in _ELEMENT_FOLLOW

    def _parse_name(self, *also: str) -> Name:
        token = self._current
        if token.type is TokenType.NAME:
            self._advance()
            return Name(token.lineno, token.col_offset, token.value)
        text = self._text_literal(token)
        if text is not None:
            self._advance()
            return Name(token.lineno, token.col_offset, text, quoted=True)
        raise self._unexpected({"identifier", "string literal", *also})

    def _parse_literal(self) -> Literal:
        """Literal text: a bare identifier or a plain string literal."""
        token = self._advance()
        if token.type is TokenType.NAME:
            return Literal(token.lineno, token.col_offset, token.value)
        text = self._text_literal(token)
        if text is None:
            raise self._unexpected({"identifier", "string literal"}, token=token)
        return Literal(token.lineno, token.col_offset, text)

    def _parse_element(self) -> Element:
        start = self._current
        name = self._parse_name()
        attrs = self._parse_attrs() if self._match(TokenType.LBRACKET) else None

        if self._match(TokenType.SEMICOLON):
            self._advance()
            return Void(start.lineno, start.col_offset, name, attrs)

        if not self._match(TokenType.LBRACE):
            raise self._unexpected({"`{`", "`;`"})
        children = self._parse_braced_group()
        return Normal(start.lineno, start.col_offset, name, attrs, children or None)

    def _parse_attrs(self) -> tuple[Attr, ...]:
        self._expect(TokenType.LBRACKET)
        attrs: list[Attr] = []
        while not self._match(TokenType.RBRACKET):
            attr = self._parse_attr()
            attrs.append(attr)
            if self._match(TokenType.COMMA):
                self._advance()
                continue
            if not self._match(TokenType.RBRACKET):
                expected = {"`,`", "`]`"}
                if attr.value is None:
                    expected.add("`=`")
                raise self._unexpected(expected)
        self._advance()  # consume ']'
        return tuple(attrs)

    def _parse_attr(self) -> Attr:
        start = self._current
        name = self._parse_name("`]`")
        if not self._match(TokenType.ASSIGN):
            return Attr(start.lineno, start.col_offset, name)
        self._advance()  # consume '='
        return Attr(start.lineno, start.col_offset, name, self._parse_attr_value())
