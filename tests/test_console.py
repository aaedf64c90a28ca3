import io

import pytest

from filevault.console import Console


def _console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_write_goes_to_stdout():
    console, out = _console("")
    console.write("Enter choice> ")
    assert out.getvalue() == "Enter choice> "


def test_read_char_skips_blanks_and_clears_line():
    console, _ = _console("  x rest\nnext\n")
    assert console.read_char() == "x"
    assert console.read_line(20) == "next"


def test_read_char_at_eof_raises():
    console, _ = _console("   \n")
    with pytest.raises(EOFError):
        console.read_char()


def test_read_string_skips_leading_blanks_and_truncates():
    console, _ = _console("  \n abcdefg\nzz\n")
    assert console.read_string(5) == "abcd"
    assert console.read_line(10) == "zz"


def test_read_line_keeps_leading_spaces():
    console, _ = _console(" ab\n")
    assert console.read_line(10) == " ab"


def test_read_line_without_newline_at_eof():
    console, _ = _console("tail")
    assert console.read_line(10) == "tail"


def test_read_line_empty_line():
    console, _ = _console("\nsecond\n")
    assert console.read_line(10) == ""
    assert console.read_line(10) == "second"


def test_read_int_leaves_rest_of_line():
    console, _ = _console("12 abc\n")
    assert console.read_int() == 12
    assert console.read_line(10) == " abc"


def test_read_int_negative():
    console, _ = _console("-3\n")
    assert console.read_int() == -3


def test_read_int_invalid_returns_zero_and_discards_line():
    console, _ = _console("xyz\n7\n")
    assert console.read_int() == 0
    assert console.read_int() == 7


def test_read_int_at_eof_raises():
    console, _ = _console("")
    with pytest.raises(EOFError):
        console.read_int()


def test_clear_input_discards_line():
    console, _ = _console("junk here\nkeep\n")
    console.clear_input()
    assert console.read_line(10) == "keep"