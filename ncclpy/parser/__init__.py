"""Parser (indentation tracking + tree building)."""

from ncclpy.parser.nccl import parse, parse_with
from ncclpy.parser.options import ParseMode, ParserOptions, resolve_options
from ncclpy.parser.parser import ParsedTree, Parser

__all__ = [
    "ParseMode",
    "ParsedTree",
    "Parser",
    "ParserOptions",
    "parse",
    "parse_with",
    "resolve_options",
]
