"""High-level parse entrypoints for nccl source text."""

from __future__ import annotations

import copy
import logging

from ncclpy.diagnostics import ScanError
from ncclpy.lexer import Scanner
from ncclpy.parser.options import ParseMode, ParserOptions, resolve_options
from ncclpy.parser.parser import ParsedTree, Parser
from ncclpy.tree import Pair

logger = logging.getLogger(__name__)


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedTree:
    """Scan and parse `text` into a fresh tree."""
    return _scan_and_parse(text, None, resolve_options(options, mode))


def parse_with(
    text: str,
    tree: Pair,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedTree:
    """Scan and parse `text` on top of `tree`, which is extended in place.

    Used to apply a previously parsed schema document: the dependent
    document's values land in the schema's tree, so a referenced block keeps
    every child the schema declared.

    The document is parsed onto a copy of `tree`, and `tree` only takes the
    new children when the result keeps a root. A failed strict parse leaves
    `tree` untouched. A successful one leaves the document's values in
    `tree`, so pass `copy.deepcopy(schema)` for each dependent document that
    must not see the others.
    """
    return _scan_and_parse(text, tree, resolve_options(options, mode))


def _scan_and_parse(text: str, tree: Pair | None, options: ParserOptions) -> ParsedTree:
    try:
        tokens = Scanner(text).scan_tokens()
    except ScanError as exc:
        logger.debug("scan failed: %s", exc.diagnostic)
        return ParsedTree(root=None, diagnostics=[exc.diagnostic])

    logger.debug("scanned %d tokens", len(tokens))
    if tree is None:
        return Parser(tokens, options=options).parse()

    parsed = Parser(tokens, tree=copy.deepcopy(tree), options=options).parse()
    if parsed.root is None:
        return parsed
    tree.children = parsed.root.children
    return ParsedTree(root=tree, diagnostics=parsed.diagnostics)
