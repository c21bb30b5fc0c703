"""Ordered keyed configuration tree."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final, TypeVar

from ncclpy.diagnostics import (
    TREE_CONVERSION_FAILED,
    TREE_KEY_NOT_FOUND,
    TREE_MULTIPLE_VALUES,
    ConversionError,
    KeyNotFoundError,
    MultipleValuesError,
)
from ncclpy.tree.scalar import Converter, convert_scalar, target_name

T = TypeVar("T")

TOP_LEVEL_KEY: Final[str] = "__top_level__"
"""Synthetic key of the root pair of a fresh parse."""


class MergePolicy(StrEnum):
    """How `Pair.merge` treats a donor that already exists verbatim."""

    OVERRIDE = "override"
    ALTERNATIVE = "alternative"


@dataclass(slots=True)
class Pair:
    """A key with an ordered list of child pairs.

    A pair without children is a scalar, a pair with one child holds a single
    value, and a pair with several children is either a list of values or a
    set of named sub-keys; which one is up to the caller's query.

    Examples:

        config = parse_text(source).unwrap()
        ports = config["server"]["port"].keys_as(int)
    """

    key: str
    children: list[Pair] = field(default_factory=list)

    @staticmethod
    def new(key: str) -> Pair:
        return Pair(key)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self.children)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_key(key)

    def __getitem__(self, key: str) -> Pair:
        return self.index(key)

    # -------------------------
    # Queries
    # -------------------------

    def has_key(self, key: str) -> bool:
        return any(child.key == key for child in self.children)

    def has_path(self, path: Sequence[str]) -> bool:
        if not path:
            return True
        child = self.get(path[0])
        return child is not None and child.has_path(path[1:])

    def get(self, key: str) -> Pair | None:
        """Return the first direct child keyed `key`, or None."""
        for child in self.children:
            if child.key == key:
                return child
        return None

    def index(self, key: str) -> Pair:
        """Return the direct child keyed `key`; raises `KeyNotFoundError` if absent."""
        child = self.get(key)
        if child is None:
            raise KeyNotFoundError.from_spec(
                TREE_KEY_NOT_FOUND,
                message=f"{TREE_KEY_NOT_FOUND.message}: {key!r}",
            )
        return child

    def value(self) -> str | None:
        if len(self.children) == 1:
            return self.children[0].key
        return None

    def value_or(self, default: str) -> str:
        value = self.value()
        return default if value is None else value

    def keys(self) -> list[str]:
        return [child.key for child in self.children]

    # -------------------------
    # Typed extraction
    # -------------------------

    def parse(self, target: Converter[T]) -> T:
        """Convert the single value of this pair with `target`."""
        value = self.value()
        if value is None:
            raise MultipleValuesError.from_spec(
                TREE_MULTIPLE_VALUES,
                message=(
                    f"{TREE_MULTIPLE_VALUES.message} under {self.key!r}, found {len(self.children)}"
                ),
            )
        return _convert(value, target)

    def value_as(self, target: Converter[T]) -> T:
        return self.parse(target)

    def value_as_or(self, target: Converter[T], default: T) -> T:
        try:
            return self.parse(target)
        except ConversionError:
            return default

    def keys_as(self, target: Converter[T]) -> list[T]:
        """Convert every child key in order; the first failure discards all results."""
        return [_convert(key, target) for key in self.keys()]

    def keys_as_or(self, target: Converter[T], default: list[T]) -> list[T]:
        try:
            return self.keys_as(target)
        except ConversionError:
            return default

    # -------------------------
    # Mutation
    # -------------------------

    def add(self, value: str) -> None:
        """Append a new leaf, even if a child with the same key exists."""
        self.children.append(Pair(value))

    def push(self, pair: Pair) -> None:
        self.children.append(pair)

    def traverse_path(self, path: Sequence[str]) -> Pair:
        """Walk `path`, creating missing children, and return the last node."""
        node = self
        for key in path:
            child = node.get(key)
            if child is None:
                child = Pair(key)
                node.children.append(child)
            node = child
        return node

    def add_slice(self, path: Sequence[str]) -> None:
        """Ensure `path` exists below this pair; inserting it again is a no-op."""
        self.traverse_path(path)

    def merge(self, other: Pair, *, policy: MergePolicy = MergePolicy.OVERRIDE) -> None:
        """Merge `other` into this pair's children, taking ownership of it.

        The child keyed `other.key` gets `other`'s children in place of its
        own; without such a child `other` is appended. Under
        `MergePolicy.ALTERNATIVE` a child equal to `other` makes `other` an
        additional alternative instead.
        """
        if policy == MergePolicy.ALTERNATIVE and other in self.children:
            self.children.append(other)
            return

        existing = self.get(other.key)
        if existing is None:
            self.children.append(other)
        else:
            existing.children = other.children

    # -------------------------
    # Debugging
    # -------------------------

    def pretty_format(self) -> str:
        lines: list[str] = []

        def walk(pair: Pair, depth: int) -> None:
            lines.append(f"{'    ' * depth}{pair.key!r}")
            for child in pair.children:
                walk(child, depth + 1)

        walk(self, 0)
        return "\n".join(lines)

    def pretty_print(self) -> None:
        print(self.pretty_format())


def _convert(text: str, target: Converter[T]) -> T:
    try:
        return convert_scalar(text, target)
    except (ValueError, TypeError) as exc:
        raise ConversionError.from_spec(
            TREE_CONVERSION_FAILED,
            message=f"{TREE_CONVERSION_FAILED.message} {text!r} to {target_name(target)}",
        ) from exc
