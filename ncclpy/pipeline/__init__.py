"""Document entrypoints and the shared parse carrier."""

from ncclpy.pipeline.entrypoints import (
    parse_file,
    parse_file_with,
    parse_text,
    parse_text_with,
    read_source,
)
from ncclpy.pipeline.result import NcclParseResult

__all__ = [
    "NcclParseResult",
    "parse_file",
    "parse_file_with",
    "parse_text",
    "parse_text_with",
    "read_source",
]
