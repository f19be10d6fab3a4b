"""Fragment: a template bound to its context.

A Fragment is the callable that appends a template's HTML to a buffer.
Because ``sprig.write`` calls any callable with the buffer, fragments nest
directly: interpolating one fragment inside another (``@sidebar``) streams
into the same buffer without building an intermediate string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sprig.environment.exceptions import (
    SourceSnippet,
    TemplateRuntimeError,
    UndefinedError,
    build_source_snippet,
)

if TYPE_CHECKING:
    from types import FunctionType, TracebackType

    from sprig.template.core import Template


class Fragment:
    """Bound template.

    Calling it appends HTML to ``buf``; ``render()`` returns a string.
    Errors raised while rendering are re-raised with the template name, the
    template line, and a source snippet:

    - ``NameError`` for a missing name becomes ``UndefinedError`` (still a
      ``NameError``)
    - ``TemplateRuntimeError`` from an unrenderable value gains a location

    Other exceptions from host code propagate unchanged; their tracebacks
    already carry template line numbers.
    """

    __slots__ = ("_func", "_template")

    def __init__(self, func: FunctionType, template: Template):
        self._func = func
        self._template = template

    def __call__(self, buf: list[str], /) -> None:
        try:
            self._func(buf)
        except UndefinedError:
            raise
        except NameError as e:
            # UnboundLocalError carries no name
            if e.name is None or not self._raised_here(e):
                raise
            raise self._undefined(e, e.name) from e
        except TemplateRuntimeError as e:
            if e.template_name is not None:
                raise
            raise self._locate(e) from e

    def render(self) -> str:
        buf: list[str] = []
        self(buf)
        return "".join(buf)

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Fragment of {self._template!r}>"

    def _raised_here(self, error: BaseException) -> bool:
        """True if the innermost frame is this template (or a lambda or genexp in it)."""
        tb = error.__traceback__
        if tb is None:
            return False
        while tb.tb_next is not None:
            tb = tb.tb_next
        code = self._func.__code__
        return tb.tb_frame.f_code is code or tb.tb_frame.f_code in code.co_consts

    def _lineno(self, tb: TracebackType | None) -> int | None:
        """Template line of the innermost frame running this template's code."""
        code = self._func.__code__
        lineno = None
        while tb is not None:
            if tb.tb_frame.f_code is code:
                lineno = tb.tb_lineno
            tb = tb.tb_next
        return lineno

    def _snippet(self, lineno: int | None) -> SourceSnippet | None:
        source = self._template.source
        if source is None or lineno is None:
            return None
        return build_source_snippet(source, lineno)

    def _undefined(self, error: NameError, name: str) -> UndefinedError:
        lineno = self._lineno(error.__traceback__)
        available = frozenset(
            key for key in self._func.__globals__ if not key.startswith("_")
        )
        return UndefinedError(
            name,
            template=self._template.name,
            lineno=lineno,
            available_names=available,
            source_snippet=self._snippet(lineno),
        )

    def _locate(self, error: TemplateRuntimeError) -> TemplateRuntimeError:
        lineno = self._lineno(error.__traceback__)
        located = TemplateRuntimeError(
            error.message,
            template_name=self._template.name or "<template>",
            lineno=lineno,
            suggestion=error.suggestion,
            source_snippet=self._snippet(lineno),
        )
        located.code = error.code
        return located
