"""Host-language leaves for the sprig AST.

Host expressions and patterns are Python source fragments. The compiler
carries them verbatim into the generated module; it never evaluates them.
"""

from __future__ import annotations

from dataclasses import dataclass

from sprig.nodes.base import Node


@dataclass(frozen=True, slots=True)
class HostExpr(Node):
    """Opaque Python expression: ``@user.name``, ``[href=url]``, ``@if x > 8``"""

    source: str


@dataclass(frozen=True, slots=True)
class HostPattern(Node):
    """Opaque Python pattern: a ``for`` target or a ``match`` arm pattern.

    Arm patterns may carry a guard (``n if n > 10``), exactly as written
    after ``case`` in Python.
    """

    source: str


@dataclass(frozen=True, slots=True)
class BoolLiteral(Node):
    """Boolean attribute value known at compile time: ``[checked=false]``"""

    value: bool
