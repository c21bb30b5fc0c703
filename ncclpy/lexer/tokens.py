"""Scanner tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag


class TokenKind(IntEnum):
    EOF = 1
    NEWLINE = 2
    INDENT = 3
    COLON = 4
    NAME = 5

    @property
    def is_layout(self) -> bool:
        return self in (TokenKind.NEWLINE, TokenKind.INDENT)


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    WAS_QUOTED = 1 << 0
    HAS_ESCAPE = 1 << 1


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    `lexeme` holds the unescaped, unquoted value for NAME tokens and the
    matched text for everything else (`"\\n"` for every NEWLINE, whatever
    the line ending was).
    """

    kind: TokenKind
    lexeme: str
    line: int
    flags: TokenFlags = TokenFlags.NONE

    @property
    def was_quoted(self) -> bool:
        return bool(self.flags & TokenFlags.WAS_QUOTED)
