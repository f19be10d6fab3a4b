"""Template structure nodes for the sprig AST."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from sprig.nodes.base import Node
from sprig.nodes.expressions import BoolLiteral, HostExpr


@dataclass(frozen=True, slots=True)
class Group(Node):
    """Ordered sequence of template content (possibly empty)."""

    nodes: tuple[Node, ...] = ()

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __bool__(self) -> bool:
        return bool(self.nodes)


@dataclass(frozen=True, slots=True)
class Literal(Node):
    """Static text, already decoded from its string literal: ``"Hello"``"""

    value: str


@dataclass(frozen=True, slots=True)
class Name(Node):
    """Tag or attribute name: an identifier (``div``) or string (``"x-data"``)."""

    value: str
    quoted: bool = False


@dataclass(frozen=True, slots=True)
class Attr(Node):
    """One attribute. ``value`` is None for the bare boolean form ``[checked]``."""

    name: Name
    value: Literal | BoolLiteral | HostExpr | None = None


@dataclass(frozen=True, slots=True)
class Element(Node):
    """Base class for HTML elements."""

    name: Name
    attrs: tuple[Attr, ...] | None = None


@dataclass(frozen=True, slots=True)
class Normal(Element):
    """Element with a body: ``div[class="a"] { ... }``

    ``children`` is None when the body was written empty (``{}``).
    """

    children: Group | None = None


@dataclass(frozen=True, slots=True)
class Void(Element):
    """Self-closing element without a body: ``meta[charset="UTF-8"];``"""
