"""sprig parser: token list to AST.

The parser is split into mixins, one per syntactic area:

- tokens: cursor primitives and error construction
- host: Python fragment scanning and validation
- elements: elements, attributes, literal text
- interpolation: ``@expr``, ``@if``, ``@match``, ``@for``
- core: Parser, groups and node classification

"""

from __future__ import annotations

from sprig.lexer import tokenize
from sprig.nodes import Group
from sprig.parser.core import Parser
from sprig.parser.errors import ParseError


def parse(source: str, name: str | None = None) -> Group:
    """Tokenize and parse template source.

    Raises:
        LexerError: On invalid characters or unterminated strings
        ParseError: On syntax errors
    """
    return Parser(tokenize(source, name), name=name, source=source).parse()


__all__ = ["ParseError", "Parser", "parse"]
