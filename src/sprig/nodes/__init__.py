"""sprig AST nodes.

Immutable, slotted dataclasses produced by the parser and consumed once by
the compiler::

    Group
    └── Node
        ├── Literal                       "text"
        ├── Element
        │   ├── Normal                    div[...] { ... }
        │   └── Void                      br[...];
        └── Interp
            ├── InterpExpr                @expr
            ├── InterpIf                  @if ... { } else if ... { } else { }
            ├── InterpMatch / MatchArm    @match ... { pat => ..., }
            └── InterpFor                 @for pat in expr { }

Host leaves (HostExpr, HostPattern) hold verbatim Python source.
"""

from sprig.nodes.base import Node
from sprig.nodes.control_flow import (
    Interp,
    InterpExpr,
    InterpFor,
    InterpIf,
    InterpMatch,
    MatchArm,
)
from sprig.nodes.expressions import BoolLiteral, HostExpr, HostPattern
from sprig.nodes.structure import Attr, Element, Group, Literal, Name, Normal, Void

__all__ = [
    "Attr",
    "BoolLiteral",
    "Element",
    "Group",
    "HostExpr",
    "HostPattern",
    "Interp",
    "InterpExpr",
    "InterpFor",
    "InterpIf",
    "InterpMatch",
    "Literal",
    "MatchArm",
    "Name",
    "Node",
    "Normal",
    "Void",
]
