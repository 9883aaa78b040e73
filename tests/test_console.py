import io

import pytest

from dungeonescape.console import Color, Console, paint


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_paint_wraps_with_reset():
    assert paint("hi", Color.GREEN) == "\033[92mhi\033[0m"


@pytest.mark.parametrize(
    "color, code",
    [
        (Color.BLOOD_RED, "\033[91m"),
        (Color.WARNING_YELL, "\033[93m"),
        (Color.GREY, "\x1b[90m"),
        (Color.BLUE, "\033[94m"),
        (Color.BRIGHT_WHITE, "\033[97m"),
    ],
)
def test_paint_uses_escape_codes(color, code):
    assert paint("x", color) == code + "x" + "\033[0m"


def test_write_goes_to_stdout():
    console, out = make_console()
    console.write("hello\n")
    assert out.getvalue() == "hello\n"


def test_read_line_strips_newline_and_shows_prompt():
    console, out = make_console("Ada\nnext\n")
    assert console.read_line("> ") == "Ada"
    assert out.getvalue() == "> "
    assert console.read_line() == "next"


def test_read_line_raises_at_end_of_input():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.read_line()


def test_read_int_parses_number():
    console, _ = make_console(" 4 \n")
    assert console.read_int() == 4


def test_read_int_rejects_text():
    console, _ = make_console("abc\n")
    with pytest.raises(ValueError):
        console.read_int()


def test_read_char_skips_blank_lines():
    console, _ = make_console("\n   \n  yes\n")
    assert console.read_char("? ") == "y"


def test_wait_for_enter_prints_line_and_prompt():
    console, out = make_console("\n")
    console.wait_for_enter("The walls are damp.")
    text = out.getvalue()
    assert text.startswith("The walls are damp.\n")
    assert paint("Press ENTER to continue...", Color.GREY) in text


def test_wait_for_enter_consumes_one_line():
    console, _ = make_console("\nafter\n")
    console.wait_for_enter("x")
    assert console.read_line() == "after"


def test_clear_writes_escape_sequence():
    console, out = make_console()
    console.clear()
    assert out.getvalue().startswith("\033[")