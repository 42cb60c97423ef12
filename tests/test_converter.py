import io

import pytest

from ontoenrich.converter import (
    ConversionError,
    Entity,
    Property,
    QuickStatementConverter,
    Statement,
)
from ontoenrich.log import Logger


@pytest.fixture
def converter():
    return QuickStatementConverter(Logger(stream=io.StringIO()), include_positions=True)


def test_simple_line_is_kept(converter):
    assert converter.convert(b"Q1\tP2\tQ3\n", "", "") == "Q1\tP2\tQ3\n"


def test_accepts_str_segment(converter):
    assert converter.convert("Q1\tP2\tQ3", "", "") == "Q1\tP2\tQ3\n"


def test_escaped_tabs_become_real_tabs(converter):
    assert converter.convert(b"Q1\\tP2\\tQ3", "", "") == "Q1\tP2\tQ3\n"


def test_fields_are_trimmed(converter):
    assert converter.convert(b"  Q1 \t P2 \t Q3  \r\n", "", "") == "Q1\tP2\tQ3\n"


def test_positions_keep_only_first_group(converter):
    assert converter.convert(b"Q1\tP2\tfoo@1,2@3", "", "") == "Q1\tP2\tfoo@1,2\n"


def test_extra_columns_joined_into_object(converter):
    assert converter.convert(b"Q1\tP2\ta\tb", "", "") == "Q1\tP2\ta\tb\n"


def test_invalid_lines_are_skipped(converter):
    out = converter.convert(b"garbage\nQ1\tP2\tQ3\nalso bad\n", "", "")
    assert out.splitlines() == ["Q1\tP2\tQ3"]


def test_double_backslash_is_not_a_tab(converter):
    with pytest.raises(ConversionError):
        converter.convert(b"Q1\\\\tP2\tQ3", "", "")


def test_no_statements_raises(converter):
    with pytest.raises(ConversionError, match="NoValidStatementsFound"):
        converter.convert(b"nothing here\n", "", "")


def test_empty_segment_raises(converter):
    with pytest.raises(ConversionError):
        converter.convert(b"", "", "")


def test_line_count_matches_valid_input(converter):
    lines = [f"Q{n}\tP{n}\tvalue{n}" for n in range(1, 6)]
    out = converter.convert("\n".join(lines).encode(), "", "")
    assert out.splitlines() == lines


def test_statement_defaults():
    stmt = Statement(Entity("Q1"), Property("P1"), "x")
    assert stmt.subject.label == ""
    assert stmt.property.data_type == ""