"""Diagnostics."""

from ncclpy.diagnostics.codes import (
    PARSER_INCORRECT_INDENT_LEVEL,
    SCANNER_EXPECTED_SCHEMA_NAME,
    SCANNER_EXPECTED_SPACES,
    SCANNER_EXPECTED_TABS,
    SCANNER_INCORRECT_SPACES,
    SCANNER_UNEXPECTED_EOF,
    SCANNER_UNTERMINATED_STRING,
    TREE_CONVERSION_FAILED,
    TREE_KEY_NOT_FOUND,
    TREE_MULTIPLE_VALUES,
    DiagnosticSpec,
    ErrorKind,
)
from ncclpy.diagnostics.diagnostic import Diagnostic
from ncclpy.diagnostics.errors import (
    ConversionError,
    KeyNotFoundError,
    MultipleValuesError,
    NcclError,
    NcclParseError,
    ScanError,
)
from ncclpy.diagnostics.report import collect_diagnostics, has_errors, of_kind

__all__ = [
    "PARSER_INCORRECT_INDENT_LEVEL",
    "SCANNER_EXPECTED_SCHEMA_NAME",
    "SCANNER_EXPECTED_SPACES",
    "SCANNER_EXPECTED_TABS",
    "SCANNER_INCORRECT_SPACES",
    "SCANNER_UNEXPECTED_EOF",
    "SCANNER_UNTERMINATED_STRING",
    "TREE_CONVERSION_FAILED",
    "TREE_KEY_NOT_FOUND",
    "TREE_MULTIPLE_VALUES",
    "ConversionError",
    "Diagnostic",
    "DiagnosticSpec",
    "ErrorKind",
    "KeyNotFoundError",
    "MultipleValuesError",
    "NcclError",
    "NcclParseError",
    "ScanError",
    "collect_diagnostics",
    "has_errors",
    "of_kind",
]
