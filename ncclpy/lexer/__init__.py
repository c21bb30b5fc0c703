"""Scanner."""

from ncclpy.lexer.scanner import IndentKind, IndentStyle, Scanner, dump_tokens, scan
from ncclpy.lexer.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "IndentKind",
    "IndentStyle",
    "Scanner",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "scan",
]
