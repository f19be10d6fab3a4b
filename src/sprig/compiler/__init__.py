"""sprig compiler: AST to Python code objects.

- core: Compiler, node dispatch, module assembly
- stream: OutputStream (literal merging and compile-time escaping)
- naming: names shared with generated code, runtime module resolution
- statements: per-node compilation mixins

"""

from __future__ import annotations

from sprig.compiler.core import Compiler
from sprig.compiler.naming import runtime_module
from sprig.compiler.stream import OutputStream

__all__ = ["Compiler", "OutputStream", "runtime_module"]
