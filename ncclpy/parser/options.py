"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from ncclpy.tree import TOP_LEVEL_KEY


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Flags controlling the root key of fresh trees and error tolerance."""

    mode: ParseMode = ParseMode.STRICT
    top_level_key: str = TOP_LEVEL_KEY

    @property
    def keep_tree_on_error(self) -> bool:
        return self.mode == ParseMode.LENIENT

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        return ParserOptions(mode=mode)


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()
