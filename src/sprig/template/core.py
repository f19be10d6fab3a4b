"""sprig Template: compiled template object ready for binding.

The Template wraps the code object produced by the Compiler. The module is
executed once, at construction, to obtain the ``render(_buf)`` function;
every ``bind()`` then builds a new function object that shares the compiled
code but reads its names from a fresh globals dict holding the context.

Architecture:
    ```
    Template
    ├── _render_code: code object   # render(_buf), compiled once
    ├── _runtime: module            # rendering capability (sprig.markup)
    ├── _module: ast.Module         # generated Python, for python_source
    └── _name, _source              # For error messages
    ```

Thread-Safety:
- Templates are immutable after construction
- ``bind()`` creates a new globals dict per call
- Multiple threads can bind and render the same template concurrently

"""

from __future__ import annotations

import ast
import builtins
from types import FunctionType
from typing import TYPE_CHECKING, Any

from sprig.compiler.naming import RUNTIME_ALIAS
from sprig.template.fragment import Fragment

if TYPE_CHECKING:
    import types
    from collections.abc import Mapping


class Template:
    """Compiled template.

    Attributes:
        name: Template identifier (for error messages)
        source: Template source text

    Example:
            >>> from sprig import Environment
            >>> t = Environment().from_string('p { "Hello, " @name "!" }')
            >>> t.render(name="World")
            '<p>Hello, World!</p>'

            >>> t.render({"name": "<World>"})  # Dict context also works
            '<p>Hello, &lt;World&gt;!</p>'

    """

    __slots__ = ("_module", "_name", "_render_code", "_runtime", "_source")

    def __init__(
        self,
        code: types.CodeType,
        module: ast.Module | None = None,
        name: str | None = None,
        source: str | None = None,
    ):
        """Execute the compiled module and keep its ``render`` code.

        Args:
            code: Code object from ``Compiler.compile``
            module: Generated module (enables ``python_source``)
            name: Template name (for error messages)
            source: Template source (for error snippets)
        """
        namespace: dict[str, Any] = {"__builtins__": builtins}
        exec(code, namespace)
        self._render_code: types.CodeType = namespace["render"].__code__
        self._runtime = namespace[RUNTIME_ALIAS]
        self._module = module
        self._name = name
        self._source = source

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def python_source(self) -> str:
        """The generated Python module, unparsed (for debugging)."""
        if self._module is None:
            raise ValueError(f"Template {self._name or '<template>'} was built without its module")
        return ast.unparse(self._module)

    def bind(self, context: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Fragment:
        """Bind a context, returning a Fragment that renders into a buffer.

        Names from ``kwargs`` override names from ``context``. Builtins stay
        reachable unless the context shadows them.
        """
        namespace: dict[str, Any] = {}
        if context:
            namespace.update(context)
        namespace.update(kwargs)
        namespace["__builtins__"] = builtins
        namespace[RUNTIME_ALIAS] = self._runtime
        func = FunctionType(self._render_code, namespace, "render")
        return Fragment(func, self)

    def render(self, context: Mapping[str, Any] | None = None, /, **kwargs: Any) -> str:
        """Render to a string.

        Example:
            >>> t.render(name="World")
            '<p>Hello, World!</p>'
        """
        return self.bind(context, **kwargs).render()

    def __repr__(self) -> str:
        return f"<Template {self._name or '<template>'}>"
