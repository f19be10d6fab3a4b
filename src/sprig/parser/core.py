"""sprig parser core: combines the parsing mixins into one Parser class.

Recursive descent with one token of lookahead for node classification and
bracket-balanced scanning for host fragments.

Example:
    >>> from sprig.lexer import tokenize
    >>> Parser(tokenize("br;")).parse()
    Group(lineno=1, col_offset=0, nodes=(Void(lineno=1, col_offset=0, ...),))
"""

from __future__ import annotations

from collections.abc import Sequence

from sprig._types import Token, TokenType
from sprig.nodes import Group, Node, Void
from sprig.parser.elements import ElementParsingMixin
from sprig.parser.host import HostParsingMixin
from sprig.parser.interpolation import InterpolationParsingMixin
from sprig.parser.tokens import TokenNavigationMixin

# What may start a node inside a group
_NODE_START = frozenset({"identifier", "string literal", "`@`"})


class Parser(
    TokenNavigationMixin,
    HostParsingMixin,
    ElementParsingMixin,
    InterpolationParsingMixin,
):
    """Parse a token list into a Group.

    Attributes:
        _tokens: Token list ending with EOF
        _pos: Index of the current token
        _name: Template name for error messages
        _source: Original source, for host fragment slicing and error snippets

    """

    __slots__ = ("_name", "_pos", "_source", "_tokens")

    def __init__(
        self,
        tokens: Sequence[Token],
        name: str | None = None,
        source: str | None = None,
    ):
        self._tokens = tokens
        self._pos = 0
        self._name = name
        self._source = source

    def parse(self) -> Group:
        """Parse the whole template.

        Raises:
            ParseError: On the first syntax error, with the offending token
                and the set of tokens that would have been accepted.
        """
        return self._parse_group(closed=False)

    def _parse_group(self, *, closed: bool) -> Group:
        """Parse nodes until ``}`` (when ``closed``) or end of template."""
        start = self._current
        nodes: list[Node] = []
        while True:
            token = self._current
            if closed and token.type is TokenType.RBRACE:
                break
            if token.type is TokenType.EOF:
                if closed:
                    raise self._unexpected(_NODE_START | {"`}`"})
                break
            if token.type is TokenType.LBRACE and nodes and isinstance(nodes[-1], Void):
                raise self._unexpected(
                    _NODE_START | ({"`}`"} if closed else set()),
                    suggestion=f"`{nodes[-1].name.value}` was closed with `;` "
                    "and cannot have a body; drop the `;` to give it one",
                )
            nodes.append(self._parse_node(closed))
        return Group(start.lineno, start.col_offset, tuple(nodes))

    def _parse_braced_group(self) -> Group:
        self._expect(TokenType.LBRACE)
        group = self._parse_group(closed=True)
        self._advance()  # consume '}'
        return group

    def _parse_node(self, closed: bool) -> Node:
        token = self._current
        if token.type is TokenType.AT:
            return self._parse_interp()
        if self._is_name_token(token):
            if self._starts_element():
                return self._parse_element()
            return self._parse_literal()

        suggestion = None
        if token.type is TokenType.STRING:
            suggestion = f"Interpolate byte strings and f-strings with `@`: @{token.value}"
        raise self._unexpected(
            _NODE_START | ({"`}`"} if closed else set()),
            suggestion=suggestion,
        )
