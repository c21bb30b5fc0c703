"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from ncclpy.diagnostics.codes import ErrorKind
from ncclpy.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return next(iter(diagnostics), None) is not None


def of_kind(diagnostics: Iterable[Diagnostic], kind: ErrorKind) -> list[Diagnostic]:
    return [d for d in diagnostics if d.kind == kind]
