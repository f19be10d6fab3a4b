"""Basic output compilation for the sprig compiler.

Provides mixin for compiling literal text and value interpolations.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from sprig.nodes import Literal

if TYPE_CHECKING:
    from sprig.compiler.stream import OutputStream
    from sprig.nodes import HostExpr, InterpExpr


class BasicStatementMixin:
    """Mixin for compiling text and ``@expr`` output."""

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # From Compiler core
        def _host_expr(self, node: HostExpr) -> ast.expr: ...

    def _compile_literal(self, node: Literal, stream: OutputStream) -> None:
        """Static text: escaped once, here, and merged with its neighbours."""
        stream.push_escaped(node.value, node.lineno)

    def _compile_interp_expr(self, node: InterpExpr, stream: OutputStream) -> None:
        """Compile ``@expr``.

        A string literal is static text (``@"a < b"`` -> ``a &lt; b``); any
        other expression is written at render time:

            _write(expr, _buf)
        """
        if isinstance(node.expr, Literal):
            stream.push_escaped(node.expr.value, node.lineno)
            return
        stream.push_write(self._host_expr(node.expr), node.lineno)
