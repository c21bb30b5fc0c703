"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass

from ncclpy.diagnostics.codes import DiagnosticSpec, ErrorKind


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured error emitted by the scanner, the parser or the tree."""

    code: str
    kind: ErrorKind
    message: str
    line: int = 0
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, *, line: int = 0, message: str | None = None) -> Diagnostic:
        return Diagnostic(
            code=spec.code,
            kind=spec.kind,
            message=message if message is not None else spec.message,
            line=line,
            hint=spec.hint,
            category=spec.category,
        )

    def __str__(self) -> str:
        if self.line:
            return f"{self.kind.value} on line {self.line}: {self.message}"
        return f"{self.kind.value}: {self.message}"
