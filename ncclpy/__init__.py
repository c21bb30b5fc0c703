"""Parser for nccl, an indentation-structured configuration language."""

from ncclpy.diagnostics import (
    ConversionError,
    Diagnostic,
    ErrorKind,
    KeyNotFoundError,
    MultipleValuesError,
    NcclError,
    NcclParseError,
    ScanError,
)
from ncclpy.lexer import Scanner, Token, TokenKind, scan
from ncclpy.parser import ParsedTree, Parser, ParseMode, ParserOptions
from ncclpy.pipeline import (
    NcclParseResult,
    parse_file,
    parse_file_with,
    parse_text,
    parse_text_with,
)
from ncclpy.tree import TOP_LEVEL_KEY, MergePolicy, Pair

__all__ = [
    "TOP_LEVEL_KEY",
    "ConversionError",
    "Diagnostic",
    "ErrorKind",
    "KeyNotFoundError",
    "MergePolicy",
    "MultipleValuesError",
    "NcclError",
    "NcclParseError",
    "NcclParseResult",
    "Pair",
    "ParseMode",
    "ParsedTree",
    "Parser",
    "ParserOptions",
    "ScanError",
    "Scanner",
    "Token",
    "TokenKind",
    "parse_file",
    "parse_file_with",
    "parse_text",
    "parse_text_with",
    "scan",
]
