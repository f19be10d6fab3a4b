"""Exceptions for the sprig template compiler.

Exception Hierarchy:
TemplateError (base)
├── TemplateSyntaxError       # Compile-time error with source position
│   ├── LexerError            # Bad character or unterminated string
│   └── ParseError            # Grammar mismatch (expected set + found token)
└── TemplateRuntimeError      # Render-time error with template context
    └── UndefinedError        # Unknown name while rendering (also a NameError)

Compile-time errors abort the whole compilation: there is no recovery and no
partial output. Every syntax error carries the template name, line, column,
and a source snippet with a caret under the offending token:

    ```
    Syntax Error: expected one of {`;`, `{`}, found `]`
      --> head.sprig:1:21
       |
      1 | meta[charset="UTF-8"]];
       |                      ^
    ```

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------


class ErrorCode(Enum):
    """Searchable error codes for sprig errors.

    Format: S-{CATEGORY}-{NUMBER}
    Categories: LEX (lexer), PAR (parser), TPL (template compile), RUN (render)
    """

    # Lexer errors (S-LEX-xxx)
    UNEXPECTED_CHARACTER = "S-LEX-001"
    UNTERMINATED_STRING = "S-LEX-002"
    INVALID_STRING = "S-LEX-003"

    # Parser errors (S-PAR-xxx)
    UNEXPECTED_TOKEN = "S-PAR-001"
    INVALID_EXPRESSION = "S-PAR-002"
    INVALID_PATTERN = "S-PAR-003"

    # Template compile errors (S-TPL-xxx)
    HOST_COMPILE_ERROR = "S-TPL-001"

    # Render errors (S-RUN-xxx)
    UNDEFINED_NAME = "S-RUN-001"
    UNRENDERABLE_VALUE = "S-RUN-002"

    @property
    def category(self) -> str:
        """Error category (e.g., 'lexer', 'parser', 'template', 'runtime')."""
        prefix = self.value.split("-")[1]
        return {
            "LEX": "lexer",
            "PAR": "parser",
            "TPL": "template",
            "RUN": "runtime",
        }.get(prefix, "unknown")


# ---------------------------------------------------------------------------
# Source snippets
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """A window of template lines around a failure.

    ``lines`` holds ``(lineno, text)`` pairs; ``error_line`` is marked with
    ``>`` and, when ``column`` is known, underlined with a caret.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        """Format snippet in Rust-inspired diagnostic style."""
        parts: list[str] = ["   |"]
        for lineno, content in self.lines:
            marker = ">" if lineno == self.error_line else " "
            parts.append(f"{marker}{lineno:>3} | {content}")
            if lineno == self.error_line and self.column is not None:
                parts.append(f"     | {' ' * self.column}^")
        parts.append("   |")
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 2,
    column: int | None = None,
) -> SourceSnippet:
    """Cut ``context_lines`` lines either side of ``error_line`` (1-based) out of ``source``."""
    all_lines = source.splitlines()
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


class TemplateError(Exception):
    """Base exception for all sprig template errors.

    Catch this to handle both compile-time and render-time failures.
    ``code`` is the searchable ErrorCode, when one applies.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a short, human-readable summary (code + message)."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = f"{self.code.value}: {header}"
        return header


class TemplateSyntaxError(TemplateError):
    """Compile-time error in template source.

    The message shows the offending source line when ``source`` and
    ``lineno`` are known, with a caret under ``col_offset``.
    """

    code: ErrorCode | None = ErrorCode.HOST_COMPILE_ERROR

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        name: str | None = None,
        source: str | None = None,
        col_offset: int | None = None,
        suggestion: str | None = None,
    ):
        self.message = message
        self.lineno = lineno
        self.name = name
        self.source = source
        self.col_offset = col_offset
        self.suggestion = suggestion
        super().__init__(self._format_message())

    @property
    def location(self) -> str:
        location = self.name or "<template>"
        if self.lineno:
            location += f":{self.lineno}"
            if self.col_offset is not None:
                location += f":{self.col_offset}"
        return location

    def _format_message(self) -> str:
        msg = f"Syntax Error: {self.message}\n  --> {self.location}"

        if self.source and self.lineno:
            lines = self.source.splitlines()
            if 0 < self.lineno <= len(lines):
                error_line = lines[self.lineno - 1]
                msg += f"\n   |\n{self.lineno:>3} | {error_line}"
                if self.col_offset is not None:
                    msg += f"\n   | {' ' * self.col_offset}^"

        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg

    def format_compact(self) -> str:
        """Format syntax error as structured terminal diagnostic."""
        parts: list[str] = []
        code_prefix = f"{self.code.value}: " if self.code else ""
        parts.append(f"{code_prefix}{self.message}")
        parts.append(f"  --> {self.location}")

        if self.source and self.lineno:
            snippet = build_source_snippet(
                self.source, self.lineno, context_lines=0, column=self.col_offset
            )
            parts.append(snippet.format())

        if self.suggestion:
            parts.append(f"  Hint: {self.suggestion}")
        return "\n".join(parts)


class LexerError(TemplateSyntaxError):
    """Source text could not be split into tokens."""

    code: ErrorCode | None = ErrorCode.UNEXPECTED_CHARACTER

    def __init__(self, message: str, *, code: ErrorCode | None = None, **kwargs: Any):
        if code is not None:
            self.code = code
        super().__init__(message, **kwargs)


class TemplateRuntimeError(TemplateError):
    """Render-time error with template context.

    Output Format:
        ```
        Runtime Error: cannot render value of type 'Decimal'
          Location: <html app.py:12>:3

          Suggestion: Convert it to str, or register a writer with sprig.write.register(Decimal)
        ```
    """

    code: ErrorCode | None = ErrorCode.UNRENDERABLE_VALUE

    def __init__(
        self,
        message: str,
        *,
        template_name: str | None = None,
        lineno: int | None = None,
        suggestion: str | None = None,
        source_snippet: SourceSnippet | None = None,
    ):
        self.message = message
        self.template_name = template_name
        self.lineno = lineno
        self.suggestion = suggestion
        self.source_snippet = source_snippet
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [f"Runtime Error: {self.message}"]

        if self.template_name or self.lineno:
            loc = self.template_name or "<template>"
            if self.lineno:
                loc += f":{self.lineno}"
            parts.append(f"  Location: {loc}")

        if self.source_snippet:
            parts.append(self.source_snippet.format())

        if self.suggestion:
            parts.append(f"\n  Suggestion: {self.suggestion}")

        return "\n".join(parts)


class UndefinedError(TemplateRuntimeError, NameError):
    """A host expression referenced a name missing from the render context.

    Subclasses ``NameError`` so code that already handles Python's own error
    keeps working.

    ``env.from_string("p { @titl }").render(title="Hi")`` fails with
    ``Undefined name 'titl'`` and the hint ``Did you mean 'title'?``.
    """

    code: ErrorCode | None = ErrorCode.UNDEFINED_NAME

    def __init__(
        self,
        name: str,
        template: str | None = None,
        lineno: int | None = None,
        available_names: frozenset[str] | None = None,
        source_snippet: SourceSnippet | None = None,
    ):
        self._available_names = available_names
        message = f"Undefined name '{name}'"
        suggestion = None
        if available_names:
            from difflib import get_close_matches

            matches = get_close_matches(name, available_names, n=1, cutoff=0.6)
            if matches:
                suggestion = f"Did you mean '{matches[0]}'?"
        super().__init__(
            message,
            template_name=template or "<template>",
            lineno=lineno,
            suggestion=suggestion,
            source_snippet=source_snippet,
        )
        # NameError.__init__ resets the name slot
        self.name = name
