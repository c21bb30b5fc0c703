"""Text and file entrypoints wrapping scan + parse."""

from __future__ import annotations

import logging
from pathlib import Path

from ncclpy.parser import ParseMode, ParserOptions
from ncclpy.parser import parse as _parse
from ncclpy.parser import parse_with as _parse_with
from ncclpy.parser.options import resolve_options
from ncclpy.pipeline.result import NcclParseResult
from ncclpy.tree import Pair

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def parse_text(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    source_path: str = "<memory>",
) -> NcclParseResult:
    """Parse one document held in memory."""
    resolved_options = resolve_options(options, mode)
    parsed = _parse(text, options=resolved_options)
    _log_outcome(source_path, parsed.has_errors, len(parsed.diagnostics))
    return NcclParseResult(
        source_text=text,
        parsed=parsed,
        options=resolved_options,
        source_path=source_path,
    )


def parse_text_with(
    text: str,
    schema: Pair,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    source_path: str = "<memory>",
) -> NcclParseResult:
    """Parse one document on top of a previously parsed schema tree.

    The schema tree is extended in place and becomes the result's tree. A
    failed strict parse leaves it untouched. Deep-copy the schema for each
    dependent document so one document's values do not leak into the next.
    """
    resolved_options = resolve_options(options, mode)
    parsed = _parse_with(text, schema, options=resolved_options)
    _log_outcome(source_path, parsed.has_errors, len(parsed.diagnostics))
    return NcclParseResult(
        source_text=text,
        parsed=parsed,
        options=resolved_options,
        source_path=source_path,
    )


def parse_file(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> NcclParseResult:
    """Read a UTF-8 document from disk and parse it."""
    text = read_source(path)
    return parse_text(text, options, mode=mode, source_path=_display_path(path))


def parse_file_with(
    path: str | Path,
    schema: Pair,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> NcclParseResult:
    """Read a UTF-8 document from disk and parse it on top of `schema`."""
    text = read_source(path)
    return parse_text_with(text, schema, options, mode=mode, source_path=_display_path(path))


def read_source(path: str | Path) -> str:
    """Decode a document as UTF-8, dropping a leading byte order mark."""
    decoded = Path(path).read_bytes().decode("utf-8")
    return decoded.removeprefix(_BOM)


def _display_path(path: str | Path) -> str:
    return str(path).replace("\\", "/")


def _log_outcome(source_path: str, failed: bool, error_count: int) -> None:
    if failed:
        logger.debug("parse of %s failed with %d error(s)", source_path, error_count)
    else:
        logger.debug("parsed %s", source_path)
