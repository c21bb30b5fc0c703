import copy
import textwrap

import pytest

from ncclpy.diagnostics import PARSER_INCORRECT_INDENT_LEVEL, ErrorKind
from ncclpy.lexer import scan
from ncclpy.parser import ParseMode, Parser, ParserOptions, parse, parse_with
from ncclpy.tree import TOP_LEVEL_KEY, Pair

SERVER_SOURCE = textwrap.dedent(
    """
    server
        domain
            example.com
            www.example.com
        port
            80
            443
    """
).lstrip()


def test_nesting_follows_indentation() -> None:
    parsed = parse("a\n    b\n")

    assert parsed.diagnostics == []
    assert parsed.root == Pair(TOP_LEVEL_KEY, [Pair("a", [Pair("b")])])


def test_server_document_end_to_end() -> None:
    parsed = parse(SERVER_SOURCE)

    assert not parsed.has_errors
    root = parsed.root
    assert root is not None
    assert root.keys() == ["server"]
    assert root["server"].keys() == ["domain", "port"]
    assert root["server"]["domain"].keys() == ["example.com", "www.example.com"]
    assert root["server"]["port"].keys_as(int) == [80, 443]


def test_tab_indented_document() -> None:
    parsed = parse("server\n\tport\n\t\t80\n\t\t443\n")

    assert parsed.root is not None
    assert parsed.root["server"]["port"].keys() == ["80", "443"]


def test_repeated_path_creates_one_leaf() -> None:
    parsed = parse("a\n    b\na\n    b\n    c\n")

    assert parsed.root == Pair(TOP_LEVEL_KEY, [Pair("a", [Pair("b"), Pair("c")])])


def test_column_zero_value_returns_to_top_level() -> None:
    parsed = parse("a\n    b\n        c\nd\n")

    assert parsed.root is not None
    assert parsed.root.keys() == ["a", "d"]
    assert parsed.root.has_path(["a", "b", "c"])


def test_dedent_by_one_level() -> None:
    parsed = parse("a\n    b\n        c\n    d\n")

    assert parsed.root is not None
    assert parsed.root["a"].keys() == ["b", "d"]


def test_descending_two_levels_is_rejected() -> None:
    parsed = parse("a\n    b\n            c\n")

    assert parsed.root is None
    assert len(parsed.diagnostics) == 1
    error = parsed.diagnostics[0]
    assert error.kind == ErrorKind.INDENTATION_ERROR
    assert error.code == PARSER_INCORRECT_INDENT_LEVEL.code
    assert error.message == "Incorrect level of indentation found"
    assert error.line == 3


def test_ascending_two_levels_is_rejected() -> None:
    parsed = parse("a\n    b\n        c\n            d\n    e\n")

    assert parsed.root is None
    assert [d.line for d in parsed.diagnostics] == [5]


def test_every_indentation_violation_is_collected() -> None:
    src = "a\n    b\n            c\nd\n    e\n            f\n"

    parsed = parse(src)

    assert parsed.root is None
    assert [d.kind for d in parsed.diagnostics] == [ErrorKind.INDENTATION_ERROR] * 2
    assert [d.line for d in parsed.diagnostics] == [3, 6]


def test_lenient_mode_keeps_tree_and_snaps_to_previous_depth() -> None:
    parsed = parse("a\n    b\n            c\n", mode=ParseMode.LENIENT)

    assert len(parsed.diagnostics) == 1
    assert parsed.has_errors
    assert parsed.root is not None
    assert parsed.root["a"].keys() == ["b", "c"]


def test_blank_and_comment_lines_do_not_reset_depth() -> None:
    src = "a\n    b\n\n    # note\n                # deep note\n        c\n"

    parsed = parse(src)

    assert parsed.diagnostics == []
    assert parsed.root is not None
    assert parsed.root.has_path(["a", "b", "c"])


def test_inline_short_form_starts_fresh_top_level_path() -> None:
    parsed = parse('"this: is neato": burrito 64\n    yes.')

    assert parsed.diagnostics == []
    root = parsed.root
    assert root is not None
    assert root.keys() == ["this: is neato", "burrito 64"]
    assert root["this: is neato"].keys() == []
    assert root["burrito 64"].keys() == ["yes."]


def test_quoted_values_keep_spaces_and_escapes() -> None:
    parsed = parse('greeting\n    "hello \\"world\\""\n')

    assert parsed.root is not None
    assert parsed.root["greeting"].value() == 'hello "world"'


def test_crlf_document_parses_to_equal_tree() -> None:
    crlf = SERVER_SOURCE.replace("\n", "\r\n")

    assert parse(crlf).root == parse(SERVER_SOURCE).root


def test_scan_error_is_reported_as_single_diagnostic() -> None:
    parsed = parse('key\n    "unterminated\n')

    assert parsed.root is None
    assert len(parsed.diagnostics) == 1
    assert parsed.diagnostics[0].kind == ErrorKind.PARSE_ERROR


def test_merge_parse_extends_supplied_tree() -> None:
    base = parse("sandwich\n    meat\n        bologna\n        ham\n").root
    assert base is not None

    parsed = parse_with("sandwich\n    meat\n        turkey\n", base)

    assert parsed.root is base
    assert base["sandwich"]["meat"].keys() == ["bologna", "ham", "turkey"]


def test_schema_block_is_visible_through_reference() -> None:
    base = parse("server\n    port\n        80\n").root
    assert base is not None

    parsed = parse_with("server\nclient\n    host\n", base)

    assert parsed.root is not None
    assert parsed.root["server"]["port"].keys() == ["80"]
    assert parsed.root.keys() == ["server", "client"]


def test_parser_accepts_token_list_directly() -> None:
    parser = Parser(scan("a\n    b\n"))

    parsed = parser.parse()

    assert parsed.root is parser.tree
    assert parser.path == ("a", "b")
    with pytest.raises(RuntimeError):
        parser.parse()


def test_custom_top_level_key() -> None:
    parsed = parse("a\n", ParserOptions(top_level_key="config"))

    assert parsed.root == Pair("config", [Pair("a")])


def test_options_and_mode_are_exclusive() -> None:
    with pytest.raises(ValueError, match="either options or mode"):
        parse("a\n", ParserOptions(), mode=ParseMode.STRICT)


def test_empty_document_yields_empty_root() -> None:
    parsed = parse("")

    assert parsed.diagnostics == []
    assert parsed.root == Pair(TOP_LEVEL_KEY)


def test_lenient_mode_on_options_keeps_tree() -> None:
    options = ParserOptions(mode=ParseMode.LENIENT)

    parsed = parse("a\n    b\n            c\n", options)

    assert options.keep_tree_on_error
    assert not ParserOptions().keep_tree_on_error
    assert parsed.has_errors
    assert parsed.root is not None
    assert parsed.root["a"].keys() == ["b", "c"]


def test_failed_merge_parse_leaves_supplied_tree_untouched() -> None:
    base = parse("sandwich\n    meat\n        ham\n").root
    assert base is not None
    snapshot = copy.deepcopy(base)

    parsed = parse_with("sandwich\n    meat\n        turkey\n                oops\n", base)

    assert parsed.root is None
    assert len(parsed.diagnostics) == 1
    assert base == snapshot
    assert base["sandwich"]["meat"].keys() == ["ham"]


def test_lenient_merge_parse_commits_to_supplied_tree() -> None:
    base = parse("sandwich\n    meat\n        ham\n").root
    assert base is not None

    parsed = parse_with(
        "sandwich\n    meat\n        turkey\n                oops\n",
        base,
        mode=ParseMode.LENIENT,
    )

    assert parsed.root is base
    assert parsed.has_errors
    assert base["sandwich"]["meat"].keys() == ["ham", "turkey", "oops"]


def test_copied_schema_keeps_dependent_documents_apart() -> None:
    schema = parse("sandwich\n    meat\n        ham\n").root
    assert schema is not None

    first = parse_with("sandwich\n    meat\n        turkey\n", copy.deepcopy(schema)).root
    second = parse_with("sandwich\n    meat\n        beef\n", copy.deepcopy(schema)).root

    assert first is not None
    assert second is not None
    assert first["sandwich"]["meat"].keys() == ["ham", "turkey"]
    assert second["sandwich"]["meat"].keys() == ["ham", "beef"]
    assert schema["sandwich"]["meat"].keys() == ["ham"]


def test_indented_comment_before_first_value_line() -> None:
    parsed = parse("a\n  # note\n    b\n")

    assert parsed.diagnostics == []
    assert parsed.root is not None
    assert parsed.root.has_path(["a", "b"])
