"""Control flow compilation for the sprig compiler.

Provides mixin for compiling ``@if`` and ``@for``. Both map onto the
matching Python statement; every branch body is compiled into its own
nested OutputStream.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING, Any

from sprig.compiler.scoping import rename, target_names
from sprig.compiler.stream import locate
from sprig.nodes import Literal
from sprig.utils.host import parse_target

if TYPE_CHECKING:
    from collections.abc import Callable

    from sprig.compiler.stream import OutputStream
    from sprig.nodes import Group, HostExpr, InterpFor, InterpIf


class ControlFlowMixin:
    """Mixin for compiling conditionals and loops."""

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # Host attributes (from Compiler)
        _locals: dict[str, str]

        # From Compiler core
        def _bind_locals(self, names: list[str]) -> dict[str, str]: ...
        def _host_expr(self, node: HostExpr) -> ast.expr: ...
        def _host_fragment(self, parse: Callable[..., Any], source: str, lineno: int) -> Any: ...
        def _compile_group(self, group: Group, stream: OutputStream) -> None: ...

    def _compile_body(self, body: Group | Literal, stream: OutputStream) -> list[ast.stmt]:
        """Compile a branch body into a nested stream; ``pass`` when it is empty."""
        inner = stream.nested()
        if isinstance(body, Literal):
            inner.push_escaped(body.value, body.lineno)
        else:
            self._compile_group(body, inner)
        return inner.finish()

    def _compile_interp_if(self, node: InterpIf, stream: OutputStream) -> None:
        """Compile ``@if`` / ``else if`` / ``else``.

        Generates:
            if test:
                ...
            elif test:
                ...
            else:
                ...
        """
        orelse: list[ast.stmt] = []
        if node.else_ is not None:
            orelse = self._compile_body(node.else_, stream)

        # Build the elif chain inside-out
        for test, body in reversed(node.elif_):
            orelse = [
                locate(
                    ast.If(
                        test=self._host_expr(test),
                        body=self._compile_body(body, stream),
                        orelse=orelse,
                    ),
                    test.lineno,
                )
            ]

        stream.push_stmt(
            locate(
                ast.If(
                    test=self._host_expr(node.test),
                    body=self._compile_body(node.body, stream),
                    orelse=orelse,
                ),
                node.lineno,
            )
        )

    def _compile_interp_for(self, node: InterpFor, stream: OutputStream) -> None:
        """Compile ``@for target in iter { ... }`` to a plain ``for`` loop.

        Target names are renamed to fresh locals that only the loop body sees
        (see ``sprig.compiler.scoping``). The iterable is evaluated outside
        that scope.
        """
        target = self._host_fragment(parse_target, node.target.source, node.target.lineno)
        bound = self._bind_locals(target_names(target))
        rename(target, self._locals, bound)
        iter_ = self._host_expr(node.iter)

        outer = self._locals
        self._locals = {**outer, **bound}
        try:
            body = self._compile_body(node.body, stream)
        finally:
            self._locals = outer

        stream.push_stmt(
            locate(
                ast.For(target=target, iter=iter_, body=body, orelse=[]),
                node.lineno,
            )
        )
