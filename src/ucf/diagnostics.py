"""Structured diagnostics for lexer configuration and lexical errors.

Neither kind of problem is raised. ``Lexer.validate_rules()`` returns a
``ValidationResult`` for configuration problems, and ``lexical_errors()``
turns the in-band ERROR tokens of a scan into positioned diagnostics that
downstream tooling can report.

Example:
    >>> stream = lexer.tokenize("1 ? 2", filename="calc.src")
    >>> for diag in lexical_errors(stream):
    ...     print(diag)
    calc.src:1:3 Unexpected character: ?

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from ucf.stream import TokenStream
from ucf.tokens import ERROR

if TYPE_CHECKING:
    from ucf.location import Position
    from ucf.tokens import Token

Severity = Literal["error", "warning", "info"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a configuration check.

    Attributes:
        valid: True when there are no errors (warnings are allowed)
        errors: Problems that make the configuration unusable
        warnings: Suspicious but usable configuration

    """

    valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @classmethod
    def from_messages(cls, errors: Iterable[str], warnings: Iterable[str]) -> ValidationResult:
        """Build a result, deriving ``valid`` from the error list."""
        errors = tuple(errors)
        return cls(valid=not errors, errors=errors, warnings=tuple(warnings))

    def __bool__(self) -> bool:
        return self.valid


@dataclass(frozen=True, slots=True)
class LexicalDiagnostic:
    """A positioned problem found while scanning.

    Attributes:
        message: Human-readable description
        position: Where the problem starts
        value: The offending source text
        severity: Diagnostic severity
        kind: Diagnostic category

    """

    message: str
    position: Position
    value: str = ""
    severity: Severity = "error"
    kind: str = "lexical"

    def __str__(self) -> str:
        return f"{self.position} {self.message}"


def lexical_errors(tokens: TokenStream | Iterable[Token]) -> list[LexicalDiagnostic]:
    """Collect a diagnostic for every ERROR token.

    Reading a stream does not move its cursor.

    Args:
        tokens: A TokenStream or any iterable of tokens

    Returns:
        Diagnostics in source order
    """
    if isinstance(tokens, TokenStream):
        tokens = tokens.get_tokens()

    diagnostics: list[LexicalDiagnostic] = []
    for token in tokens:
        if token.type != ERROR:
            continue
        metadata = token.metadata or {}
        message = metadata.get("error") or f"Unexpected character: {token.value}"
        diagnostics.append(
            LexicalDiagnostic(message=message, position=token.position, value=token.value)
        )
    return diagnostics


__all__ = [
    "LexicalDiagnostic",
    "Severity",
    "ValidationResult",
    "lexical_errors",
]
