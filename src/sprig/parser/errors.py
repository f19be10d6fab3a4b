"""Parser error handling for sprig.

Provides ParseError, a TemplateSyntaxError that also records which tokens
would have been accepted at the failing position.
"""

from __future__ import annotations

from collections.abc import Iterable

from sprig._types import Token
from sprig.environment.exceptions import ErrorCode, TemplateSyntaxError


def describe_expected(expected: Iterable[str]) -> str:
    """Render an expected-token set as ``{a, b, c}`` (sorted, stable)."""
    return "{" + ", ".join(sorted(expected)) + "}"


class ParseError(TemplateSyntaxError):
    """Parser error with the offending token and the acceptable alternatives.

    Attributes:
        token: Token at which parsing stopped
        expected: Descriptions of the tokens that would have been accepted
            (empty when the failure is not a plain token mismatch, e.g. an
            invalid host expression)
    """

    code: ErrorCode | None = ErrorCode.UNEXPECTED_TOKEN

    def __init__(
        self,
        message: str,
        token: Token,
        *,
        expected: frozenset[str] = frozenset(),
        name: str | None = None,
        source: str | None = None,
        suggestion: str | None = None,
        code: ErrorCode | None = None,
    ):
        self.token = token
        self.expected = expected
        if code is not None:
            self.code = code
        super().__init__(
            message,
            lineno=token.lineno,
            name=name,
            source=source,
            col_offset=token.col_offset,
            suggestion=suggestion,
        )

    @classmethod
    def unexpected(
        cls,
        token: Token,
        expected: Iterable[str],
        **kwargs: object,
    ) -> ParseError:
        """Build the standard ``expected one of {…}, found …`` error."""
        expected = frozenset(expected)
        if len(expected) == 1:
            wanted = next(iter(expected))
            message = f"expected {wanted}, found {token.describe()}"
        else:
            message = f"expected one of {describe_expected(expected)}, found {token.describe()}"
        return cls(message, token, expected=expected, **kwargs)  # type: ignore[arg-type]
