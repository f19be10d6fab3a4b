"""Interpolation nodes for the sprig AST (everything introduced by ``@``)."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sprig.nodes.base import Node
from sprig.nodes.expressions import HostExpr, HostPattern
from sprig.nodes.structure import Group, Literal


@dataclass(frozen=True, slots=True)
class Interp(Node):
    """Base class for dynamic interpolations."""


@dataclass(frozen=True, slots=True)
class InterpExpr(Interp):
    """Value interpolation: ``@user.name``

    A bare string literal (``@"Hi"``) is kept as a Literal and compiled
    like static text.
    """

    expr: HostExpr | Literal


@dataclass(frozen=True, slots=True)
class InterpIf(Interp):
    """Conditional: ``@if cond { ... } else if cond { ... } else { ... }``"""

    test: HostExpr
    body: Group
    elif_: Sequence[tuple[HostExpr, Group]] = ()
    else_: Group | None = None


@dataclass(frozen=True, slots=True)
class MatchArm(Node):
    """One ``pattern => body`` arm. ``body`` is a Group or a string shorthand."""

    pattern: HostPattern
    body: Group | Literal


@dataclass(frozen=True, slots=True)
class InterpMatch(Interp):
    """Pattern dispatch: ``@match kind { "a" => { ... }, _ => "other" }``"""

    subject: HostExpr
    arms: Sequence[MatchArm] = ()


@dataclass(frozen=True, slots=True)
class InterpFor(Interp):
    """Iteration: ``@for item in items { ... }``"""

    target: HostPattern
    iter: HostExpr
    body: Group
