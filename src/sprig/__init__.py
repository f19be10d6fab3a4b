"""sprig: HTML templates compiled to Python.

A small templating language for HTML. Templates are compiled ahead of
rendering into a plain Python function: static markup is escaped once at
compile time and merged into as few string constants as possible, and only
interpolated values are escaped at render time.

Quickstart:
    >>> from sprig import Environment
    >>> env = Environment()
    >>> page = env.from_string('''
    ...     meta[charset="UTF-8"];
    ...     div[class="greeting"] {
    ...         @if name { "Hello, " @name "!" } else { "Hello!" }
    ...     }
    ... ''')
    >>> page.render(name="World")
    '<meta charset="UTF-8"><div class="greeting">Hello, World!</div>'

Inline in Python code:
    >>> from sprig import html
    >>> title = "Tom & Jerry"
    >>> html("h1 { @title }").render()
    '<h1>Tom &amp; Jerry</h1>'

Architecture:
Template Source → Lexer → Parser → sprig AST → Compiler → Python AST → exec()

Pipeline stages:
1. **Lexer**: Tokenizes template source (Python lexical rules)
2. **Parser**: Builds immutable sprig AST from tokens
3. **Compiler**: Transforms sprig AST to Python AST, merging static text
4. **Template**: Wraps compiled code with ``bind()`` / ``render()``

Syntax:
- ``div[class="a", hidden] { ... }``: element with attributes and body
- ``br;``: void element
- ``"text"`` or a bare word: literal text (escaped)
- ``@expr``: any Python expression, escaped at render time
- ``@if cond { } else if cond { } else { }``
- ``@match value { pattern => { ... }, _ => "text" }``
- ``@for target in iterable { ... }``

Thread-Safety:
- Template compilation is idempotent (same input → same output)
- Rendering writes only to the caller's buffer
- The template cache is lock-protected

Free-Threading (PEP 703):
Declares GIL-independence via `_Py_mod_gil = 0` attribute.

"""

from sprig._types import Token, TokenType
from sprig.environment import (
    Environment,
    ErrorCode,
    LexerError,
    SourceSnippet,
    TemplateError,
    TemplateRuntimeError,
    TemplateSyntaxError,
    UndefinedError,
    build_source_snippet,
)
from sprig.embed import html
from sprig.markup import Attr, Html, Raw, raw, write
from sprig.parser import ParseError
from sprig.template import Fragment, Template
from sprig.utils.html import html_escape

__version__ = "0.1.0"

__all__ = [
    "Attr",
    "Environment",
    "ErrorCode",
    "Fragment",
    "Html",
    "LexerError",
    "ParseError",
    "Raw",
    "SourceSnippet",
    "Template",
    "TemplateError",
    "TemplateRuntimeError",
    "TemplateSyntaxError",
    "Token",
    "TokenType",
    "UndefinedError",
    "__version__",
    "build_source_snippet",
    "html",
    "html_escape",
    "raw",
    "write",
]


# Free-threading declaration (PEP 703)
def __getattr__(name: str) -> object:
    """Module-level getattr for free-threading declaration."""
    if name == "_Py_mod_gil":
        # Signal: this module is safe for free-threading
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'sprig' has no attribute {name!r}")
