"""Names shared between the compiler and the code it generates."""

from __future__ import annotations

import functools

# Alias the generated module binds the rendering capability to
RUNTIME_ALIAS = "_sprig"

# Locals cached in the render() prologue
APPEND = "_append"
WRITE = "_write"
ATTR = "_Attr"
BUF = "_buf"


@functools.cache
def runtime_module() -> str:
    """Dotted path of the module generated code imports (``sprig.markup``).

    Derived from this package's own import path, so a vendored or renamed
    copy of sprig generates code that imports its own runtime. Resolved once
    per process.
    """
    package = __name__.rpartition(".compiler.")[0]
    return f"{package}.markup"
