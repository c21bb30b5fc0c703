"""Diagnostic codes and messages."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class ErrorKind(StrEnum):
    """Error taxonomy shared by the scanner, the parser and the tree."""

    PARSE_ERROR = "parse_error"
    INDENTATION_ERROR = "indentation_error"
    KEY_NOT_FOUND = "key_not_found"
    CONVERSION_ERROR = "conversion_error"
    MULTIPLE_VALUES = "multiple_values"


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    kind: ErrorKind
    message: str
    hint: str | None = None
    category: str | None = None


SCANNER_EXPECTED_SCHEMA_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_EXPECTED_SCHEMA_NAME",
    kind=ErrorKind.PARSE_ERROR,
    message="Expected schema name, found EOF",
    hint="Follow the colon with a value on the same line.",
    category="scanner",
)

SCANNER_UNEXPECTED_EOF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNEXPECTED_EOF",
    kind=ErrorKind.PARSE_ERROR,
    message="Expected value, found EOF",
    hint="Remove trailing indentation at the end of the document.",
    category="scanner",
)

SCANNER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNTERMINATED_STRING",
    kind=ErrorKind.PARSE_ERROR,
    message="Unterminated string",
    hint="Close the string with a double quote.",
    category="scanner",
)

SCANNER_INCORRECT_SPACES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_INCORRECT_SPACES",
    kind=ErrorKind.INDENTATION_ERROR,
    message="Incorrect number of spaces",
    hint="Indent every level with the width used by the first indented line.",
    category="scanner",
)

SCANNER_EXPECTED_TABS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_EXPECTED_TABS",
    kind=ErrorKind.INDENTATION_ERROR,
    message="Expected tabs, found spaces",
    hint="This document is indented with tabs.",
    category="scanner",
)

SCANNER_EXPECTED_SPACES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_EXPECTED_SPACES",
    kind=ErrorKind.INDENTATION_ERROR,
    message="Expected spaces, found tabs",
    hint="This document is indented with spaces.",
    category="scanner",
)

PARSER_INCORRECT_INDENT_LEVEL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INCORRECT_INDENT_LEVEL",
    kind=ErrorKind.INDENTATION_ERROR,
    message="Incorrect level of indentation found",
    hint="Nest at most one level deeper than the previous line.",
    category="parser",
)

TREE_KEY_NOT_FOUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TREE_KEY_NOT_FOUND",
    kind=ErrorKind.KEY_NOT_FOUND,
    message="Pair does not contain key",
    hint="Check with `has_key` or use `get` for an optional lookup.",
    category="tree",
)

TREE_CONVERSION_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TREE_CONVERSION_FAILED",
    kind=ErrorKind.CONVERSION_ERROR,
    message="Could not convert value",
    category="tree",
)

TREE_MULTIPLE_VALUES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TREE_MULTIPLE_VALUES",
    kind=ErrorKind.MULTIPLE_VALUES,
    message="Could not convert value: expected exactly one value",
    hint="Use `keys()` or `keys_as()` for pairs with several values.",
    category="tree",
)
