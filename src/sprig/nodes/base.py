"""Base node class for the sprig AST."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track the source location of their first token for error
    reporting and line mapping. Nodes are immutable and form a strict tree:
    a node is owned by exactly one parent and never shared.

    """

    lineno: int
    col_offset: int
