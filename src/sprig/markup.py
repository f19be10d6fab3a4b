"""Rendering capability used by compiled templates.

Generated code imports this module and calls ``write(value, buf)`` for every
dynamic value. ``write`` is a ``functools.singledispatch`` function, so the
set of renderable types is open: register a writer for your own type and it
can be interpolated anywhere.

Rendering rules:

===================  ===============================================
Value                Output
===================  ===============================================
``None``             nothing
``bool``             ``true`` / ``false``
``int``              decimal text
``float``            shortest round-trip text (``repr``)
``str``              HTML-escaped text
``Raw``              verbatim
``Attr``             `` name="value"`` (see ``Attr``)
callable             called with the buffer (fragments, components)
``__html__()``       its result, verbatim
anything else        ``TemplateRuntimeError``
===================  ===============================================

Example:
    >>> from decimal import Decimal
    >>> @write.register(Decimal)
    ... def _(value, buf):
    ...     buf.append(f"{value:.2f}")
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Any, Protocol, runtime_checkable

from sprig.environment.exceptions import TemplateRuntimeError
from sprig.utils.html import html_escape

__all__ = ["Attr", "Html", "Raw", "raw", "write"]


@runtime_checkable
class Html(Protocol):
    """Anything that renders by appending HTML to a buffer."""

    def __call__(self, buf: list[str], /) -> None: ...


class Raw(str):
    """Text that is already valid HTML and must not be escaped.

    Example:
        >>> buf = []
        >>> write(Raw("<b>hi</b>"), buf)
        >>> buf
        ['<b>hi</b>']
    """

    __slots__ = ()

    def __html__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"Raw({str.__repr__(self)})"


def raw(text: str) -> Raw:
    """Mark ``text`` as pre-escaped HTML."""
    return Raw(text)


@dataclass(frozen=True, slots=True)
class Attr:
    """A dynamic ``name=value`` attribute pair.

    The pair writes its own leading space so that omitted attributes leave no
    trace in the tag:

    - ``None`` and ``False`` omit the attribute
    - ``True`` writes the bare name (`` checked``)
    - any other value writes `` name="..."`` with the value rendered by
      ``write`` (so strings are escaped)

    The name is written as-is.
    """

    name: str
    value: Any


@singledispatch
def write(value: Any, buf: list[str]) -> None:
    """Append the HTML rendering of ``value`` to ``buf``.

    Raises:
        TemplateRuntimeError: If no writer handles the value's type
    """
    if callable(value):
        value(buf)
        return
    html = getattr(value, "__html__", None)
    if html is not None:
        buf.append(html())
        return
    type_name = type(value).__name__
    raise TemplateRuntimeError(
        f"cannot render value of type '{type_name}'",
        suggestion=f"Convert it to str, or register a writer with sprig.write.register({type_name})",
    )


@write.register(type(None))
def _write_none(value: None, buf: list[str]) -> None:
    pass


@write.register(bool)
def _write_bool(value: bool, buf: list[str]) -> None:
    buf.append("true" if value else "false")


@write.register(int)
def _write_int(value: int, buf: list[str]) -> None:
    buf.append(int.__repr__(value))


@write.register(float)
def _write_float(value: float, buf: list[str]) -> None:
    buf.append(float.__repr__(value))


@write.register(str)
def _write_str(value: str, buf: list[str]) -> None:
    if type(value) is not str:
        # str subclasses that know their HTML form (e.g. markupsafe.Markup)
        html = getattr(value, "__html__", None)
        if html is not None:
            buf.append(html())
            return
    buf.append(html_escape(value))


@write.register(Raw)
def _write_raw(value: Raw, buf: list[str]) -> None:
    buf.append(str(value))


@write.register(Attr)
def _write_attr(attr: Attr, buf: list[str]) -> None:
    value = attr.value
    if value is None or value is False:
        return
    if value is True:
        buf.append(f" {attr.name}")
        return
    buf.append(f' {attr.name}="')
    write(value, buf)
    buf.append('"')

