"""Element compilation for the sprig compiler.

Provides mixin for compiling Normal and Void elements and their attributes.
Everything about an element is static markup except attribute values that
are host expressions, so most elements collapse into the surrounding
literal text.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from sprig.compiler.naming import ATTR
from sprig.nodes import BoolLiteral, HostExpr, Literal

if TYPE_CHECKING:
    from sprig.compiler.stream import OutputStream
    from sprig.nodes import Attr, Element, Group, Normal, Void


class ElementCompilationMixin:
    """Mixin for compiling elements."""

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # From Compiler core
        def _host_expr(self, node: HostExpr) -> ast.expr: ...
        def _compile_group(self, group: Group, stream: OutputStream) -> None: ...

    def _compile_normal(self, node: Normal, stream: OutputStream) -> None:
        """``div[...] { children }`` -> ``<div ...>children</div>``"""
        self._compile_open_tag(node, stream)
        if node.children is not None:
            self._compile_group(node.children, stream)
        stream.push_raw("</", node.lineno)
        stream.push_raw(node.name.value)
        stream.push_char(">")

    def _compile_void(self, node: Void, stream: OutputStream) -> None:
        """``br[...];`` -> ``<br ...>``"""
        self._compile_open_tag(node, stream)

    def _compile_open_tag(self, node: Element, stream: OutputStream) -> None:
        # Names are written unescaped
        stream.push_char("<", node.lineno)
        stream.push_raw(node.name.value)
        for attr in node.attrs or ():
            self._compile_attr(attr, stream)
        stream.push_char(">")

    def _compile_attr(self, attr: Attr, stream: OutputStream) -> None:
        """Compile one attribute.

        ================  ==========================================
        Value             Output
        ================  ==========================================
        none / ``true``   `` name``
        ``false``         nothing
        ``"text"``        `` name="text"`` (escaped at compile time)
        expression        ``_write(_Attr("name", expr), _buf)``
        ================  ==========================================
        """
        name = attr.name.value
        value = attr.value

        if value is None or (isinstance(value, BoolLiteral) and value.value):
            stream.push_raw(f" {name}", attr.lineno)
        elif isinstance(value, BoolLiteral):
            return
        elif isinstance(value, Literal):
            stream.push_raw(f' {name}="', attr.lineno)
            stream.push_escaped(value.value)
            stream.push_char('"')
        elif isinstance(value, HostExpr):
            pair = ast.Call(
                func=ast.Name(id=ATTR, ctx=ast.Load()),
                args=[ast.Constant(value=name), self._host_expr(value)],
                keywords=[],
            )
            stream.push_write(pair, attr.lineno)
        else:
            raise TypeError(f"cannot compile attribute value of type {type(value).__name__}")
