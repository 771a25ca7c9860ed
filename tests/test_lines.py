"""Tests for debstanza.lines."""

from debstanza.lines import LineKind, classify, classify_text


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------

def test_field_start():
    line = classify("Package: foo")
    assert line.kind is LineKind.FIELD_START
    assert line.name == "Package"
    assert line.text == "foo"

def test_field_start_trims_name_and_value():
    line = classify("Version :   1.0-2  ")
    assert line.name == "Version"
    assert line.text == "1.0-2"

def test_field_start_splits_on_first_colon():
    line = classify("Version: 1:2.3-4")
    assert line.name == "Version"
    assert line.text == "1:2.3-4"

def test_field_start_empty_value():
    line = classify("Description:")
    assert line.kind is LineKind.FIELD_START
    assert line.text == ""

def test_continuation_space():
    line = classify(" long line one")
    assert line.kind is LineKind.CONTINUATION
    assert line.text == "long line one"

def test_continuation_keeps_internal_whitespace():
    line = classify(" \t  a  b\tc ")
    assert line.kind is LineKind.CONTINUATION
    assert line.text == "a  b\tc "

def test_continuation_tab():
    assert classify("\tx").kind is LineKind.CONTINUATION

def test_continuation_with_colon():
    line = classify(" /etc/foo: bar")
    assert line.kind is LineKind.CONTINUATION
    assert line.name is None

def test_blank_empty():
    assert classify("").kind is LineKind.BLANK

def test_blank_whitespace_only():
    assert classify(" \t ").kind is LineKind.BLANK

def test_malformed_no_colon():
    line = classify("garbage")
    assert line.kind is LineKind.MALFORMED
    assert line.text == "garbage"

def test_malformed_empty_name():
    assert classify(": value").kind is LineKind.MALFORMED

def test_malformed_whitespace_name():
    assert classify("\x0c: value").kind is LineKind.MALFORMED

def test_line_number_kept():
    assert classify("A: b", 7).number == 7


# ---------------------------------------------------------------------------
# comments
# ---------------------------------------------------------------------------

def test_hash_line_malformed_by_default():
    assert classify("# note").kind is LineKind.MALFORMED

def test_hash_line_with_colon_is_field_by_default():
    assert classify("#A: b").kind is LineKind.FIELD_START

def test_hash_comment():
    assert classify("# note: x", comments=True).kind is LineKind.COMMENT

def test_armor_comment():
    line = classify("-----BEGIN PGP SIGNED MESSAGE-----", comments=True)
    assert line.kind is LineKind.COMMENT

def test_single_dash_not_comment():
    assert classify("-x", comments=True).kind is LineKind.MALFORMED

def test_indented_hash_is_continuation():
    assert classify(" # x", comments=True).kind is LineKind.CONTINUATION


# ---------------------------------------------------------------------------
# classify_text
# ---------------------------------------------------------------------------

def test_classify_text_empty():
    assert classify_text("") == []

def test_classify_text_numbers_from_one():
    lines = classify_text("A: 1\n b\n\nC: 2\n")
    assert [l.number for l in lines] == [1, 2, 3, 4]
    assert [l.kind for l in lines] == [
        LineKind.FIELD_START,
        LineKind.CONTINUATION,
        LineKind.BLANK,
        LineKind.FIELD_START,
    ]

def test_classify_text_no_trailing_newline():
    assert len(classify_text("A: 1\nB: 2")) == 2

def test_classify_text_crlf():
    lines = classify_text("A: 1\r\n b \r\n")
    assert lines[0].text == "1"
    assert lines[1].text == "b "

def test_classify_text_trailing_blank_lines_kept():
    lines = classify_text("A: 1\n\n\n")
    assert [l.kind for l in lines] == [LineKind.FIELD_START, LineKind.BLANK, LineKind.BLANK]
