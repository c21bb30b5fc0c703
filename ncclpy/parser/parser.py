"""Indentation-tracking parser."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from ncclpy.diagnostics import PARSER_INCORRECT_INDENT_LEVEL, Diagnostic, has_errors
from ncclpy.lexer import Token, TokenKind
from ncclpy.parser.options import ParserOptions
from ncclpy.tree import Pair

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedTree:
    """Parse outcome: the tree, or every error found while building it."""

    root: Pair | None
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


class Parser:
    """Builds a `Pair` tree from tokens, or extends a caller-supplied one.

    Each value's position in the tree comes from the indentation depth of its
    line: `path` holds the key chosen at every depth so far, and a value at
    depth `d` replaces everything from `d` onwards.
    """

    def __init__(
        self,
        tokens: Sequence[Token],
        tree: Pair | None = None,
        options: ParserOptions | None = None,
    ) -> None:
        self._tokens = list(tokens)
        self._options = options or ParserOptions()
        self._tree = tree if tree is not None else Pair(self._options.top_level_key)
        self._path: list[str] = []
        self._indent = 0
        self._prev_indent = 0
        self._line = 1
        self._line_has_value = False
        self._position = 0
        self._diagnostics: list[Diagnostic] = []
        self._finished = False

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def tree(self) -> Pair:
        return self._tree

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(self._path)

    @property
    def line(self) -> int:
        return self._line

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    def parse(self) -> ParsedTree:
        if self._finished:
            raise RuntimeError("Parser.parse() can only run once per token list")
        self._finished = True

        while self._position < len(self._tokens):
            token = self._tokens[self._position]
            self._line = token.line
            match token.kind:
                case TokenKind.NAME:
                    self._value(token)
                case TokenKind.INDENT:
                    self._indent_run(token)
                case TokenKind.NEWLINE:
                    self._newline()
                case TokenKind.COLON:
                    pass
                case TokenKind.EOF:
                    break
            self._position += 1

        logger.debug(
            "parsed %d tokens into %r with %d error(s)",
            len(self._tokens),
            self._tree.key,
            len(self._diagnostics),
        )

        if self._diagnostics and not self._options.keep_tree_on_error:
            return ParsedTree(root=None, diagnostics=list(self._diagnostics))
        return ParsedTree(root=self._tree, diagnostics=list(self._diagnostics))

    def _value(self, token: Token) -> None:
        if self._indent <= len(self._path):
            del self._path[self._indent :]
        self._path.append(token.lexeme)
        self._tree.add_slice(self._path)
        self._line_has_value = True

        # `"key": value` on one line: the next value starts over at the top level.
        if not self._nth(1).kind.is_layout and self._nth(2).kind == TokenKind.NAME:
            self._path.clear()
            self._indent = 0

    def _indent_run(self, token: Token) -> None:
        depth = 1
        while self._nth(depth).kind == TokenKind.INDENT:
            depth += 1
        self._position += depth - 1

        # Blank or comment-only line.
        if self._nth(1).kind in (TokenKind.NEWLINE, TokenKind.EOF):
            return

        if abs(depth - self._prev_indent) <= 1:
            self._indent = depth
            return

        self._diagnostics.append(Diagnostic.from_spec(PARSER_INCORRECT_INDENT_LEVEL, line=token.line))
        self._indent = self._prev_indent

    def _newline(self) -> None:
        if self._line_has_value:
            self._prev_indent = self._indent
        self._indent = 0
        self._line_has_value = False

    def _nth(self, n: int) -> Token:
        index = self._position + n
        if index >= len(self._tokens):
            return Token(TokenKind.EOF, "", self._line)
        return self._tokens[index]
