"""sprig Compiler core: AST to Python code object.

The Compiler transforms a sprig Group into an ``ast.Module``, then compiles
it to a code object ready for ``exec()``. Uses a mixin-based design, one
mixin per node family.

Design Principles:
1. **AST-to-AST**: Generate ``ast.Module``, never source strings
2. **Literal merging**: Static markup is escaped at compile time and
   accumulated until the next dynamic operation (see ``OutputStream``)
3. **Local caching**: ``_append``, ``_write`` and ``_Attr`` are locals
4. **O(1) dispatch**: Dict-based node type → handler lookup

Generated module for ``div[class="a"] { @x }``::

    import sprig.markup as _sprig

    def render(_buf):
        _append = _buf.append
        _write = _sprig.write
        _Attr = _sprig.Attr
        _append('<div class="a">')
        _write(x, _buf)
        _append('</div>')

Host expressions keep their template line numbers, so a traceback from
inside ``render`` points at the template line that produced it.
"""

from __future__ import annotations

import ast
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from sprig.compiler.naming import APPEND, ATTR, BUF, RUNTIME_ALIAS, WRITE, runtime_module
from sprig.compiler.scoping import local_name, rename
from sprig.compiler.statements import StatementCompilationMixin
from sprig.compiler.stream import OutputStream
from sprig.environment.exceptions import TemplateSyntaxError
from sprig.utils.host import parse_expression

if TYPE_CHECKING:
    import types

    from sprig.nodes import Group, HostExpr, Node

logger = logging.getLogger(__name__)


def _assign(name: str, value: ast.expr) -> ast.stmt:
    return ast.Assign(targets=[ast.Name(id=name, ctx=ast.Store())], value=value)


def _runtime_attr(attr: str) -> ast.expr:
    return ast.Attribute(
        value=ast.Name(id=RUNTIME_ALIAS, ctx=ast.Load()),
        attr=attr,
        ctx=ast.Load(),
    )


class Compiler(StatementCompilationMixin):
    """Compile sprig AST to Python code objects.

    A Compiler holds only per-compilation state, so one instance may be
    reused for any number of templates (but not from several threads at
    once).

    Attributes:
        _name: Template name for error messages
        _source: Template source for error snippets
        _locals: Names bound by enclosing @for targets and match arms,
            mapped to the renamed locals generated code uses for them
        _scope_count: Number of block scopes opened so far (numbers the locals)

    Node Dispatch:
        Uses O(1) dict lookup for node type → handler:
            ```python
            dispatch = {
                "Literal": self._compile_literal,
                "Normal": self._compile_normal,
                ...
            }
            handler = dispatch[type(node).__name__]
            ```

    Example:
            >>> from sprig.parser import parse
            >>> code = Compiler().compile(parse("p { @name }"), name="greeting")
            >>> namespace = {}
            >>> exec(code, namespace)
            >>> buf = []
            >>> render = namespace["render"]
            >>> render.__globals__["name"] = "World"
            >>> render(buf)
            >>> "".join(buf)
            '<p>World</p>'

    """

    __slots__ = ("_locals", "_name", "_node_dispatch", "_scope_count", "_source")

    def __init__(self) -> None:
        self._name: str | None = None
        self._source: str | None = None
        self._locals: dict[str, str] = {}
        self._scope_count = 0

    def compile(
        self,
        group: Group,
        name: str | None = None,
        filename: str | None = None,
        source: str | None = None,
    ) -> types.CodeType:
        """Compile a parsed template to a code object.

        Args:
            group: Root Group from the parser
            name: Template name for error messages
            filename: Filename recorded in the code object (defaults to name)
            source: Template source, used for error snippets

        Raises:
            TemplateSyntaxError: If Python rejects the generated module, for
                example a ``match`` arm after an irrefutable pattern.
        """
        self._name = name
        self._source = source
        return self.compile_module(self.generate(group), name, filename, source)

    def compile_module(
        self,
        module: ast.Module,
        name: str | None = None,
        filename: str | None = None,
        source: str | None = None,
    ) -> types.CodeType:
        """Compile a module returned by ``generate`` (see ``compile``)."""
        try:
            code = compile(module, filename or name or "<template>", "exec")
        except SyntaxError as e:
            raise TemplateSyntaxError(
                e.msg,
                lineno=e.lineno,
                name=name,
                source=source,
            ) from e
        logger.debug("Compiled template %s", name or "<template>")
        return code

    def generate(self, group: Group) -> ast.Module:
        """Build the ``ast.Module`` defining ``render(_buf)``.

        Deterministic: the same Group always produces an equal module.
        """
        self._locals = {}
        self._scope_count = 0
        stream = OutputStream()
        self._compile_group(group, stream)

        body: list[ast.stmt] = [
            # _append = _buf.append
            _assign(
                APPEND,
                ast.Attribute(value=ast.Name(id=BUF, ctx=ast.Load()), attr="append", ctx=ast.Load()),
            ),
            # _write = _sprig.write
            _assign(WRITE, _runtime_attr("write")),
            # _Attr = _sprig.Attr
            _assign(ATTR, _runtime_attr("Attr")),
            *stream.finish(),
        ]

        render = ast.FunctionDef(
            name="render",
            args=ast.arguments(
                posonlyargs=[],
                args=[ast.arg(arg=BUF)],
                vararg=None,
                kwonlyargs=[],
                kw_defaults=[],
                kwarg=None,
                defaults=[],
            ),
            body=body,
            decorator_list=[],
            returns=None,
            type_params=[],
        )
        module = ast.Module(
            body=[
                # import sprig.markup as _sprig
                ast.Import(names=[ast.alias(name=runtime_module(), asname=RUNTIME_ALIAS)]),
                render,
            ],
            type_ignores=[],
        )
        return ast.fix_missing_locations(module)

    def _compile_group(self, group: Group, stream: OutputStream) -> None:
        for node in group:
            self._compile_node(node, stream)

    def _compile_node(self, node: Node, stream: OutputStream) -> None:
        """Compile a single AST node into ``stream``.

        Complexity: O(1) type dispatch using class name lookup.
        """
        dispatch = self._get_node_dispatch()
        handler = dispatch.get(type(node).__name__)
        if handler is None:
            raise TypeError(f"cannot compile node of type {type(node).__name__}")
        handler(node, stream)

    def _get_node_dispatch(self) -> dict[str, Callable[[Any, OutputStream], None]]:
        """Get node type dispatch table (cached on first call)."""
        if not hasattr(self, "_node_dispatch"):
            self._node_dispatch = {
                "Literal": self._compile_literal,
                "Normal": self._compile_normal,
                "Void": self._compile_void,
                "InterpExpr": self._compile_interp_expr,
                "InterpIf": self._compile_interp_if,
                "InterpMatch": self._compile_interp_match,
                "InterpFor": self._compile_interp_for,
            }
        return self._node_dispatch

    def _host_fragment(self, parse: Callable[..., Any], source: str, lineno: int) -> Any:
        """Parse a host fragment into fresh ``ast`` nodes at its template line.

        The parser has already validated every fragment; this only fails for
        hand-built ASTs.
        """
        try:
            return parse(source, lineno)
        except SyntaxError as e:
            raise TemplateSyntaxError(
                f"invalid Python fragment `{source}`: {e.msg}",
                lineno=lineno,
                name=self._name,
                source=self._source,
            ) from e

    def _host_expr(self, node: HostExpr) -> ast.expr:
        expr: ast.expr = self._host_fragment(parse_expression, node.source, node.lineno)
        rename(expr, self._locals)
        return expr

    def _bind_locals(self, names: list[str]) -> dict[str, str]:
        """Fresh local names for the names a loop target or arm pattern binds."""
        if not names:
            return {}
        self._scope_count += 1
        return {name: local_name(self._scope_count, name) for name in names}
