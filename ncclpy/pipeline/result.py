"""Parse carrier shared by the text and file entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ncclpy.diagnostics import NcclParseError
from ncclpy.parser import ParsedTree, ParserOptions

if TYPE_CHECKING:
    from ncclpy.diagnostics import Diagnostic
    from ncclpy.tree import Pair


@dataclass(frozen=True, slots=True)
class NcclParseResult:
    """One document's parse: source, options, and the tree or its errors."""

    source_text: str
    parsed: ParsedTree
    options: ParserOptions
    source_path: str = "<memory>"

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return self.parsed.has_errors

    @property
    def tree(self) -> Pair | None:
        return self.parsed.root

    def unwrap(self) -> Pair:
        """Return the tree, raising `NcclParseError` if the parse reported errors."""
        if self.has_errors or self.parsed.root is None:
            raise NcclParseError(self.diagnostics)
        return self.parsed.root
