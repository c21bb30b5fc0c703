"""Scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final, NoReturn

from ncclpy.diagnostics import (
    SCANNER_EXPECTED_SCHEMA_NAME,
    SCANNER_EXPECTED_SPACES,
    SCANNER_EXPECTED_TABS,
    SCANNER_INCORRECT_SPACES,
    SCANNER_UNEXPECTED_EOF,
    SCANNER_UNTERMINATED_STRING,
    DiagnosticSpec,
    ScanError,
)
from ncclpy.lexer.tokens import Token, TokenFlags, TokenKind

_ESCAPES: Final[dict[str, str]] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


class IndentKind(StrEnum):
    NEITHER = "neither"
    TABS = "tabs"
    SPACES = "spaces"


@dataclass(frozen=True, slots=True)
class IndentStyle:
    """Indentation unit of one document, fixed by its first indented line."""

    kind: IndentKind = IndentKind.NEITHER
    width: int = 0

    @staticmethod
    def tabs() -> IndentStyle:
        return IndentStyle(IndentKind.TABS, 1)

    @staticmethod
    def spaces(width: int) -> IndentStyle:
        return IndentStyle(IndentKind.SPACES, width)


class Scanner:
    """Turns one complete document into tokens, failing on the first lexical error."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []
        self._start = 0
        self._position = 0
        self._line = 1
        self._indent_style = IndentStyle()
        self._at_line_start = True
        self._finished = False

    @property
    def source(self) -> str:
        return self._source

    @property
    def indent_style(self) -> IndentStyle:
        return self._indent_style

    @property
    def line(self) -> int:
        return self._line

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source; raises `ScanError` on the first violation."""
        if not self._finished:
            while not self.is_eof:
                self._start = self._position
                self._scan_token()
            self._tokens.append(Token(TokenKind.EOF, "", self._line))
            self._finished = True
        return list(self._tokens)

    def _scan_token(self) -> None:
        ch = self._advance()
        match ch:
            case ":":
                self._colon()
            case "#":
                self._skip_to_line_end()
            case " ":
                self._spaces()
            case "\t":
                self._tab()
            case "\n":
                self._add(TokenKind.NEWLINE, "\n")
                self._line += 1
                self._at_line_start = True
            case "\r":
                # CR of a CRLF pair (or a stray CR): never part of token text.
                pass
            case '"':
                self._string()
            case _:
                self._bare_value()

    def _colon(self) -> None:
        self._add(TokenKind.COLON, ":")
        self._at_line_start = False
        while self._current_char() == " ":
            self._advance()
        if self.is_eof:
            self._fail(SCANNER_EXPECTED_SCHEMA_NAME)

    def _spaces(self) -> None:
        if not self._at_line_start:
            self._skip_separators()
            return
        if self._rest_of_line_is_empty():
            self._skip_separators()
            return

        match self._indent_style.kind:
            case IndentKind.TABS:
                self._fail(SCANNER_EXPECTED_TABS)
            case IndentKind.NEITHER:
                count = 1
                while self._current_char() == " ":
                    self._advance()
                    count += 1
                if self.is_eof:
                    self._fail(SCANNER_UNEXPECTED_EOF)
                self._indent_style = IndentStyle.spaces(count)
            case IndentKind.SPACES:
                width = self._indent_style.width
                count = 1
                while count < width and self._current_char() == " ":
                    self._advance()
                    count += 1
                if self.is_eof:
                    self._fail(SCANNER_UNEXPECTED_EOF)
                if count != width:
                    self._fail(SCANNER_INCORRECT_SPACES)

        self._add(TokenKind.INDENT, self._source[self._start : self._position])

    def _tab(self) -> None:
        if not self._at_line_start:
            self._skip_separators()
            return
        if self._rest_of_line_is_empty():
            self._skip_separators()
            return

        match self._indent_style.kind:
            case IndentKind.SPACES:
                self._fail(SCANNER_EXPECTED_SPACES)
            case IndentKind.NEITHER:
                self._indent_style = IndentStyle.tabs()
            case IndentKind.TABS:
                pass

        self._add(TokenKind.INDENT, "\t")

    def _string(self) -> None:
        start_line = self._line
        flags = TokenFlags.WAS_QUOTED
        chars: list[str] = []

        while not self.is_eof:
            ch = self._advance()
            if ch == '"':
                self._add(TokenKind.NAME, "".join(chars), line=start_line, flags=flags)
                self._at_line_start = False
                return
            if ch == "\\" and not self.is_eof:
                escaped = self._advance()
                flags |= TokenFlags.HAS_ESCAPE
                chars.append(_ESCAPES.get(escaped, "\\" + escaped))
                continue
            if ch == "\r" and self._current_char() == "\n":
                continue
            if ch == "\n":
                self._line += 1
            chars.append(ch)

        self._fail(SCANNER_UNTERMINATED_STRING, line=start_line)

    def _bare_value(self) -> None:
        self._skip_to_line_end()
        text = self._source[self._start : self._position]
        self._add(TokenKind.NAME, text.removesuffix("\r"))
        self._at_line_start = False

    def _skip_to_line_end(self) -> None:
        while not self.is_eof and self._current_char() != "\n":
            self._advance()

    def _skip_separators(self) -> None:
        while self._current_char() in (" ", "\t"):
            self._advance()

    def _rest_of_line_is_empty(self) -> bool:
        """True when only spaces/tabs, optionally followed by a comment, remain on the line."""
        index = self._position
        while index < len(self._source) and self._source[index] in (" ", "\t"):
            index += 1
        return self._source.startswith(("\n", "\r\n", "#"), index)

    def _add(
        self,
        kind: TokenKind,
        lexeme: str,
        *,
        line: int | None = None,
        flags: TokenFlags = TokenFlags.NONE,
    ) -> None:
        self._tokens.append(Token(kind, lexeme, self._line if line is None else line, flags))

    def _fail(self, spec: DiagnosticSpec, *, line: int | None = None) -> NoReturn:
        raise ScanError.from_spec(spec, line=self._line if line is None else line)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self) -> str:
        ch = self._source[self._position]
        self._position += 1
        return ch


def scan(source: str) -> list[Token]:
    """Scan a complete document with a fresh scanner."""
    return Scanner(source).scan_tokens()


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, line, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<8} line={tok.line:<4} flags={tok.flags!s:<24} text={tok.lexeme!r}")
