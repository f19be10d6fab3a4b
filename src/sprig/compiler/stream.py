"""OutputStream: literal merging for generated render code.

Static HTML is accumulated in a pending buffer and emitted as a single
``_append("...")`` call right before the next dynamic operation (or at the
end of a body). Adjacent static pieces therefore collapse into one string
constant no matter how many template nodes produced them:

    div[class="a"] { "Hi" }     ->   _append('<div class="a">Hi</div>')

    div { @x }                  ->   _append('<div>')
                                     _write(x, _buf)
                                     _append('</div>')

Branch bodies (``if``, ``match`` arms, ``for``) get their own nested stream,
so text is never merged across a control-flow boundary.
"""

from __future__ import annotations

import ast

from sprig.compiler.naming import APPEND, BUF, WRITE
from sprig.utils.html import html_escape


def locate(stmt: ast.stmt, lineno: int | None) -> ast.stmt:
    """Pin a generated statement to a template line (single-line range)."""
    if lineno is not None:
        stmt.lineno = stmt.end_lineno = lineno
        stmt.col_offset = stmt.end_col_offset = 0
    return stmt


def _call(func: str, *args: ast.expr) -> ast.stmt:
    return ast.Expr(
        value=ast.Call(
            func=ast.Name(id=func, ctx=ast.Load()),
            args=list(args),
            keywords=[],
        )
    )


class OutputStream:
    """Pending static text plus the statements emitted so far.

    Attributes:
        stmts: Statements emitted so far (the buffer is not included until
            ``flush``)
    """

    __slots__ = ("_buffer", "_lineno", "stmts")

    def __init__(self) -> None:
        self._buffer: list[str] = []
        self._lineno: int | None = None
        self.stmts: list[ast.stmt] = []

    def push_char(self, char: str, lineno: int | None = None) -> None:
        self.push_raw(char, lineno)

    def push_raw(self, text: str, lineno: int | None = None) -> None:
        """Buffer text verbatim (markup the compiler produced itself)."""
        if self._lineno is None:
            self._lineno = lineno
        self._buffer.append(text)

    def push_escaped(self, text: str, lineno: int | None = None) -> None:
        """Buffer user text, escaped now so nothing is escaped at render time."""
        self.push_raw(html_escape(text), lineno)

    @property
    def pending(self) -> str:
        return "".join(self._buffer)

    def flush(self) -> None:
        """Emit the buffered text as one ``_append`` call, if there is any."""
        text = "".join(self._buffer)
        lineno = self._lineno
        self._buffer.clear()
        self._lineno = None
        if not text:
            return
        self.stmts.append(locate(_call(APPEND, ast.Constant(value=text)), lineno))

    def push_write(self, expr: ast.expr, lineno: int | None = None) -> None:
        """Flush, then emit ``_write(expr, _buf)`` for a dynamic value."""
        self.flush()
        self.stmts.append(locate(_call(WRITE, expr, ast.Name(id=BUF, ctx=ast.Load())), lineno))

    def push_stmt(self, stmt: ast.stmt) -> None:
        """Flush, then emit a block statement (``if``, ``match``, ``for``)."""
        self.flush()
        self.stmts.append(stmt)

    def nested(self) -> OutputStream:
        """Fresh stream for a branch body."""
        return OutputStream()

    def finish(self) -> list[ast.stmt]:
        """Flush and return the statements; ``pass`` stands in for an empty body."""
        self.flush()
        return self.stmts or [ast.Pass()]
