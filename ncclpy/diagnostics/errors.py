"""Exceptions that carry diagnostics out of code paths that cannot return them."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Self

from ncclpy.diagnostics.codes import DiagnosticSpec, ErrorKind
from ncclpy.diagnostics.diagnostic import Diagnostic


class NcclError(Exception):
    """Base class for every ncclpy error; wraps one `Diagnostic`."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic

    @classmethod
    def from_spec(cls, spec: DiagnosticSpec, *, line: int = 0, message: str | None = None) -> Self:
        return cls(Diagnostic.from_spec(spec, line=line, message=message))

    @property
    def kind(self) -> ErrorKind:
        return self.diagnostic.kind

    @property
    def line(self) -> int:
        return self.diagnostic.line


class ScanError(NcclError):
    """First lexical violation; scanning stops and no tokens are returned."""


class KeyNotFoundError(NcclError, KeyError):
    """Raised by `Pair.index` when the key is absent."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.diagnostic)


class ConversionError(NcclError, ValueError):
    """A key could not be converted to the requested type."""


class MultipleValuesError(ConversionError):
    """Single-value extraction on a pair with zero or several values."""


class NcclParseError(NcclError):
    """Raised by `unwrap()` on a failed parse; keeps every diagnostic."""

    def __init__(self, diagnostics: Sequence[Diagnostic]) -> None:
        if not diagnostics:
            raise ValueError("NcclParseError needs at least one diagnostic")
        super().__init__(diagnostics[0])
        self.diagnostics = tuple(diagnostics)

    def __str__(self) -> str:
        if len(self.diagnostics) == 1:
            return str(self.diagnostics[0])
        lines = [f"{len(self.diagnostics)} errors:"]
        lines.extend(f"  {d}" for d in self.diagnostics)
        return "\n".join(lines)
