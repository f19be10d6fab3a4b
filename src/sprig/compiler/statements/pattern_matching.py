"""Pattern matching compilation for the sprig compiler.

Provides mixin for compiling ``@match``. Arm patterns are Python patterns,
so the arms become ``case`` clauses of a native ``match`` statement. Capture
names are renamed to locals of their own arm (see ``sprig.compiler.scoping``):

    @match status {
        "ok" => { span { "fine" } },
        code if code >= 500 => "server error",
        _ => "other",
    }

Generates:
    match status:
        case 'ok':
            _append('<span>fine</span>')
        case _l1_code if _l1_code >= 500:
            _append('server error')
        case _:
            _append('other')

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING, Any

from sprig.compiler.scoping import pattern_names, rename
from sprig.compiler.stream import locate
from sprig.utils.host import parse_case

if TYPE_CHECKING:
    from collections.abc import Callable

    from sprig.compiler.stream import OutputStream
    from sprig.nodes import Group, HostExpr, InterpMatch, Literal


class PatternMatchingMixin:
    """Mixin for compiling ``@match``."""

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

        # From ControlFlowMixin
        def _compile_body(self, body: Group | Literal, stream: OutputStream) -> list[ast.stmt]: ...

    def _compile_interp_match(self, node: InterpMatch, stream: OutputStream) -> None:
        subject = self._host_expr(node.subject)
        cases: list[ast.match_case] = []
        for arm in node.arms:
            pattern, guard = self._host_fragment(
                parse_case, arm.pattern.source, arm.pattern.lineno
            )
            # Captures are visible to the guard and the arm body only
            bound = self._bind_locals(pattern_names(pattern))
            rename(pattern, self._locals, bound)
            outer = self._locals
            self._locals = {**outer, **bound}
            try:
                if guard is not None:
                    rename(guard, self._locals)
                body = self._compile_body(arm.body, stream)
            finally:
                self._locals = outer
            cases.append(ast.match_case(pattern=pattern, guard=guard, body=body))

        if not cases:
            # Python has no empty match; evaluate the subject and render nothing
            cases.append(
                ast.match_case(
                    pattern=ast.MatchAs(pattern=None, name=None),
                    guard=None,
                    body=[ast.Pass()],
                )
            )

        stream.push_stmt(
            locate(
                ast.Match(subject=subject, cases=cases),
                node.lineno,
            )
        )
