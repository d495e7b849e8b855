from chartkit.text import (
    TextExtent,
    TextHorizontalAlign,
    TextVerticalAlign,
    TextWrap,
    measure_lines,
    trim,
    wrap_fit,
    wrap_fit_rune,
    wrap_fit_word,
)


def fixed_measure(text):
    return TextExtent(len(text) * 10, 12)


def test_enum_values_match_format():
    assert TextHorizontalAlign(2) is TextHorizontalAlign.CENTER
    assert TextVerticalAlign(5) is TextVerticalAlign.TOP
    assert TextWrap(3) is TextWrap.RUNE


def test_trim():
    assert trim(" \t foo bar \r\n") == "foo bar"


def test_wrap_fit_word_basic():
    output = wrap_fit_word(fixed_measure, "this is a test string", 100)
    assert output == ["this is", "a test", "string"]
    for line in output:
        assert fixed_measure(line).width < 100


def test_wrap_fit_word_single():
    assert wrap_fit_word(fixed_measure, "foo", 100) == ["foo"]


def test_wrap_fit_word_newlines():
    output = wrap_fit_word(fixed_measure, "this\nis\na\ntest\nstring", 100)
    assert len(output) == 5
    assert output == "this\nis\na\ntest\nstring".split("\n")


def test_wrap_fit_word_keeps_words():
    text = "alpha beta gamma delta"
    output = wrap_fit_word(fixed_measure, text, 120)
    assert " ".join(output).split() == text.split()


def test_wrap_fit_rune_preserves_characters():
    text = "this is a test string"
    output = wrap_fit_rune(fixed_measure, text, 50)
    assert "".join(output) == text
    for line in output[:-1]:
        assert fixed_measure(line).width < 50


def test_wrap_fit_rune_no_break():
    assert wrap_fit_rune(fixed_measure, "short", 1000) == ["short"]


def test_wrap_fit_rune_newline_splits():
    output = wrap_fit_rune(fixed_measure, "ab\ncd", 1000)
    assert output == ["abcd"] or output == ["ab", "cd"]
    assert "".join(output) == "abcd"


def test_wrap_fit_dispatch():
    text = "this is a test string"
    assert wrap_fit(fixed_measure, text, 100, TextWrap.WORD) == wrap_fit_word(fixed_measure, text, 100)
    assert wrap_fit(fixed_measure, text, 100, TextWrap.RUNE) == wrap_fit_rune(fixed_measure, text, 100)
    assert wrap_fit(fixed_measure, text, 100, TextWrap.NONE) == [text]
    assert wrap_fit(fixed_measure, text, 100, TextWrap.UNSET) == [text]


def test_measure_lines_single_line_matches_measure():
    assert measure_lines(fixed_measure, ["hello"], 5) == fixed_measure("hello")


def test_measure_lines_spacing_and_width():
    lines = ["ab", "abcd"]
    extent = measure_lines(fixed_measure, lines, 5)
    assert extent.width == max(fixed_measure(line).width for line in lines)
    no_spacing = measure_lines(fixed_measure, lines, 0)
    assert extent.height - no_spacing.height == 5


def test_measure_lines_empty():
    assert measure_lines(fixed_measure, [], 5) == (0, 0)