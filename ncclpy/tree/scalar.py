"""Scalar conversion helpers for typed extraction from pairs."""

from __future__ import annotations

from collections.abc import Callable
import re
from typing import TypeAlias, TypeVar

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.\d+|\d+\.\d*|\.\d+)$")

T = TypeVar("T")

Converter: TypeAlias = Callable[[str], T]


def parse_bool(text: str) -> bool | None:
    normalized = text.strip().lower()
    if normalized in {"yes", "true"}:
        return True
    if normalized in {"no", "false"}:
        return False
    return None


def parse_number(text: str) -> int | float | None:
    normalized = text.strip()
    if not normalized:
        return None

    if _INTEGER_RE.fullmatch(normalized):
        return int(normalized)

    if _FLOAT_RE.fullmatch(normalized):
        return float(normalized)

    return None


def convert_scalar(text: str, target: Converter[T]) -> T:
    """Convert raw key text with `target`.

    `bool` is special-cased since `bool("false")` is true; every other
    target is called with the text and must raise `ValueError` or
    `TypeError` on bad input.
    """
    if target is bool:
        value = parse_bool(text)
        if value is None:
            raise ValueError(f"not a boolean: {text!r}")
        return value  # type: ignore[return-value]
    return target(text)


def target_name(target: Converter[object]) -> str:
    return getattr(target, "__name__", repr(target))


__all__ = [
    "Converter",
    "convert_scalar",
    "parse_bool",
    "parse_number",
    "target_name",
]
