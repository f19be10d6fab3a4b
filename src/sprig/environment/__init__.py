"""Environment, configuration and errors for sprig.

- exceptions: error hierarchy, error codes, source snippets
- core: Environment (compile entry point, template cache)

"""

from __future__ import annotations

from sprig.environment.core import Environment
from sprig.environment.exceptions import (
    ErrorCode,
    LexerError,
    SourceSnippet,
    TemplateError,
    TemplateRuntimeError,
    TemplateSyntaxError,
    UndefinedError,
    build_source_snippet,
)

__all__ = [
    "Environment",
    "ErrorCode",
    "LexerError",
    "SourceSnippet",
    "TemplateError",
    "TemplateRuntimeError",
    "TemplateSyntaxError",
    "UndefinedError",
    "build_source_snippet",
]
