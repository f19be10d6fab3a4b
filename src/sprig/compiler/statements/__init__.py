"""Statement compilation for the sprig compiler.

Provides mixins that compile sprig AST nodes into an OutputStream.

The statements package is organized into logical modules:
- basic: literal text and ``@expr`` output
- elements: Normal and Void elements, attributes
- control_flow: ``@if`` and ``@for``
- pattern_matching: ``@match``

Uses inline TYPE_CHECKING declarations for host attributes.

"""

from __future__ import annotations

from sprig.compiler.statements.basic import BasicStatementMixin
from sprig.compiler.statements.control_flow import ControlFlowMixin
from sprig.compiler.statements.elements import ElementCompilationMixin
from sprig.compiler.statements.pattern_matching import PatternMatchingMixin


class StatementCompilationMixin(
    BasicStatementMixin,
    ElementCompilationMixin,
    ControlFlowMixin,
    PatternMatchingMixin,
):
    """Combined mixin for compiling all node types.

    Host attributes and cross-mixin dependencies are declared via inline
    TYPE_CHECKING blocks in each individual mixin.

    """


__all__ = [
    "BasicStatementMixin",
    "ControlFlowMixin",
    "ElementCompilationMixin",
    "PatternMatchingMixin",
    "StatementCompilationMixin",
]
