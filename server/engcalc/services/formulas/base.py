from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from engcalc.core.exceptions import AppError
from engcalc.models.calculation import ErrorKind


class FormulaError(AppError):
    status_code = 400
    error_type = "FORMULA_ERROR"
    kind: ErrorKind = ErrorKind.invalid_domain

    def __init__(self, message: str, *, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class DivisionByZeroError(FormulaError):
    error_type = "DIVISION_BY_ZERO"
    kind = ErrorKind.division_by_zero


class InvalidDomainError(FormulaError):
    error_type = "INVALID_DOMAIN"
    kind = ErrorKind.invalid_domain


def require_finite(*values: float) -> None:
    if not all(math.isfinite(value) for value in values):
        raise InvalidDomainError("Result is out of numeric range")


@dataclass
class FormulaOutput:
    data: dict[str, Any]
    derivation: str


@dataclass
class Derivation:
    """Builds the "work shown" text: title, formula, given values, steps, result."""

    title: str
    _lines: list[str] = field(default_factory=list)

    def formula(self, text: str) -> "Derivation":
        self._lines.extend(["", f"Formula: {text}"])
        return self

    def section(self, heading: str, *items: str) -> "Derivation":
        self._lines.extend(["", f"{heading}:"])
        self._lines.extend(f"• {item}" for item in items)
        return self

    def note(self, *text: str) -> "Derivation":
        self._lines.append("")
        self._lines.extend(text)
        return self

    def result(self, text: str) -> "Derivation":
        self._lines.extend(["", f"Result: {text}"])
        return self

    def render(self) -> str:
        return "\n".join([f"{self.title}:", *self._lines])
