"""Python fragment parsing for host expressions and patterns.

Templates embed Python source in four places: values (``@expr``, attribute
values), conditions and iterables, ``for`` targets, and ``match`` arm
patterns. Each fragment is parsed by wrapping it in the smallest Python
statement that accepts it, then lifting the interesting node back out.

The parser calls these functions to find and validate fragment boundaries;
the compiler calls them again to obtain fresh ``ast`` nodes for the
generated module. All functions raise the ``SyntaxError`` reported by
Python's own parser.

Line numbers of the returned nodes are shifted so that ``lineno`` refers to
the template line the fragment started on.
"""

from __future__ import annotations

import ast
from typing import cast

# Expressions that would turn the render function into a generator or coroutine
_SUSPENDING = (ast.Yield, ast.YieldFrom, ast.Await)


def _reject_suspending(node: ast.AST) -> None:
    for child in ast.walk(node):
        if isinstance(child, _SUSPENDING):
            keyword = "await" if isinstance(child, ast.Await) else "yield"
            raise SyntaxError(f"'{keyword}' is not allowed inside a template")


def parse_expression(source: str, lineno: int = 1) -> ast.expr:
    """Parse a Python expression fragment.

    The fragment is parenthesized so it may span several lines.

    Example:
        >>> ast.dump(parse_expression("x + 1"))
        "BinOp(left=Name(id='x', ctx=Load()), op=Add(), right=Constant(value=1))"
    """
    tree = ast.parse(f"({source})", mode="eval")
    body = tree.body
    _reject_suspending(body)
    ast.increment_lineno(body, lineno - 1)
    return body


def parse_target(source: str, lineno: int = 1) -> ast.expr:
    """Parse a ``for`` loop target such as ``item`` or ``(i, item)``."""
    tree = ast.parse(f"for {source} in ():\n    pass")
    loop = cast(ast.For, tree.body[0])
    target = loop.target
    _reject_suspending(target)
    ast.increment_lineno(target, lineno - 1)
    return target


def parse_case(source: str, lineno: int = 1) -> tuple[ast.pattern, ast.expr | None]:
    """Parse a ``match`` arm pattern with an optional guard.

    Accepts anything Python accepts after ``case``: literals, captures,
    class patterns, or-patterns, and ``pattern if guard``.

    Returns:
        (pattern, guard) where guard is None when absent
    """
    tree = ast.parse(f"match None:\n    case {source}:\n        pass")
    statement = cast(ast.Match, tree.body[0])
    case = statement.cases[0]
    if case.guard is not None:
        _reject_suspending(case.guard)
    # The fragment sits on line 2 of the wrapper statement
    ast.increment_lineno(case.pattern, lineno - 2)
    if case.guard is not None:
        ast.increment_lineno(case.guard, lineno - 2)
    return case.pattern, case.guard
