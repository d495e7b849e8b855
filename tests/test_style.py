import pytest

from chartkit.color import COLOR_BLACK, COLOR_TRANSPARENT, COLOR_WHITE, Color
from chartkit.style import (
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_SPACING,
    DEFAULT_STROKE_WIDTH,
    Style,
    hidden,
    shown,
)
from chartkit.text import TextHorizontalAlign, TextVerticalAlign, TextWrap

BACKGROUND_PADDING = (5, 5, 5, 5)
FONT = object()


def _full_style():
    return Style(
        stroke_color=COLOR_WHITE,
        stroke_width=5.0,
        fill_color=COLOR_WHITE,
        font_color=COLOR_WHITE,
        padding=BACKGROUND_PADDING,
    )


def test_is_zero():
    assert Style().is_zero()
    assert not Style(stroke_color=COLOR_WHITE).is_zero()
    assert not Style(fill_color=COLOR_WHITE).is_zero()
    assert not Style(stroke_width=5.0).is_zero()
    assert not Style(font_size=12.0).is_zero()
    assert not Style(font_color=COLOR_WHITE).is_zero()
    assert not Style(font=FONT).is_zero()


def test_get_stroke_color():
    unset = Style()
    assert unset.get_stroke_color() == COLOR_TRANSPARENT
    assert unset.get_stroke_color(COLOR_WHITE) == COLOR_WHITE
    set_ = Style(stroke_color=COLOR_WHITE)
    assert set_.get_stroke_color() == COLOR_WHITE
    assert set_.get_stroke_color(COLOR_BLACK) == COLOR_WHITE


def test_get_fill_color():
    unset = Style()
    assert unset.get_fill_color() == COLOR_TRANSPARENT
    assert unset.get_fill_color(COLOR_WHITE) == COLOR_WHITE
    set_ = Style(fill_color=COLOR_WHITE)
    assert set_.get_fill_color() == COLOR_WHITE
    assert set_.get_fill_color(COLOR_BLACK) == COLOR_WHITE


def test_get_stroke_width():
    unset = Style()
    assert unset.get_stroke_width() == DEFAULT_STROKE_WIDTH
    assert unset.get_stroke_width(DEFAULT_STROKE_WIDTH + 1) == DEFAULT_STROKE_WIDTH + 1
    set_ = Style(stroke_width=DEFAULT_STROKE_WIDTH + 2)
    assert set_.get_stroke_width() == DEFAULT_STROKE_WIDTH + 2
    assert set_.get_stroke_width(DEFAULT_STROKE_WIDTH + 1) == DEFAULT_STROKE_WIDTH + 2


def test_get_font_size():
    unset = Style()
    assert unset.get_font_size() == DEFAULT_FONT_SIZE
    assert unset.get_font_size(DEFAULT_FONT_SIZE + 1) == DEFAULT_FONT_SIZE + 1
    set_ = Style(font_size=DEFAULT_FONT_SIZE + 2)
    assert set_.get_font_size() == DEFAULT_FONT_SIZE + 2
    assert set_.get_font_size(DEFAULT_FONT_SIZE + 1) == DEFAULT_FONT_SIZE + 2


def test_get_font_color():
    unset = Style()
    assert unset.get_font_color() == COLOR_TRANSPARENT
    assert unset.get_font_color(COLOR_WHITE) == COLOR_WHITE
    set_ = Style(font_color=COLOR_WHITE)
    assert set_.get_font_color() == COLOR_WHITE
    assert set_.get_font_color(COLOR_BLACK) == COLOR_WHITE


def test_get_font():
    unset = Style()
    assert unset.get_font() is None
    assert unset.get_font(FONT) is FONT
    assert Style(font=FONT).get_font() is FONT


def test_get_padding():
    unset = Style()
    assert unset.get_padding() == (0, 0, 0, 0)
    assert unset.get_padding(BACKGROUND_PADDING) == BACKGROUND_PADDING
    set_ = Style(padding=BACKGROUND_PADDING)
    assert set_.get_padding() == BACKGROUND_PADDING
    assert set_.get_padding((6, 6, 6, 6)) == BACKGROUND_PADDING


def test_inherit_from_unset_takes_defaults():
    set_ = Style(
        stroke_color=COLOR_WHITE,
        stroke_width=5.0,
        fill_color=COLOR_WHITE,
        font_color=COLOR_WHITE,
        font=FONT,
        padding=BACKGROUND_PADDING,
    )
    assert Style().inherit_from(set_) == set_


def test_inherit_from_keeps_own_values():
    own = Style(stroke_color=COLOR_BLACK, font_size=20.0, text_wrap=TextWrap.RUNE)
    defaults = Style(
        stroke_color=COLOR_WHITE,
        font_size=8.0,
        text_wrap=TextWrap.WORD,
        text_vertical_align=TextVerticalAlign.TOP,
    )
    result = own.inherit_from(defaults)
    assert result.stroke_color == COLOR_BLACK
    assert result.font_size == 20.0
    assert result.text_wrap == TextWrap.RUNE
    assert result.text_vertical_align == TextVerticalAlign.TOP


def test_get_stroke_options():
    stroke = _full_style().get_stroke_options()
    assert not stroke.stroke_color.is_zero()
    assert stroke.stroke_width != 0
    assert stroke.fill_color.is_zero()
    assert stroke.font_color.is_zero()


def test_get_fill_options():
    fill = _full_style().get_fill_options()
    assert not fill.fill_color.is_zero()
    assert fill.stroke_width == 0
    assert fill.stroke_color.is_zero()
    assert fill.font_color.is_zero()


def test_get_fill_and_stroke_options():
    both = _full_style().get_fill_and_stroke_options()
    assert not both.fill_color.is_zero()
    assert both.stroke_width != 0
    assert not both.stroke_color.is_zero()
    assert both.font_color.is_zero()


def test_get_text_options():
    text = _full_style().get_text_options()
    assert text.stroke_color.is_zero()
    assert text.stroke_width == 0
    assert text.fill_color.is_zero()
    assert not text.font_color.is_zero()


def test_get_dot_options_uses_dot_color():
    dots = Style(dot_color=COLOR_BLACK, stroke_dash_array=[1.0, 2.0]).get_dot_options()
    assert dots.fill_color == COLOR_BLACK
    assert dots.stroke_color == COLOR_BLACK
    assert dots.stroke_width == 1.0
    assert dots.stroke_dash_array is None


def test_line_spacing_and_alignment_defaults():
    unset = Style()
    assert unset.get_text_line_spacing() == DEFAULT_LINE_SPACING
    assert unset.get_text_horizontal_align() == TextHorizontalAlign.UNSET
    assert unset.get_text_horizontal_align(TextHorizontalAlign.CENTER) == TextHorizontalAlign.CENTER


def test_text_rotation_degrees():
    assert Style().get_text_rotation_degrees() == 0
    assert Style().get_text_rotation_degrees(90.0) == 90.0
    assert Style(text_rotation_degrees=45.0).get_text_rotation_degrees(90.0) == 45.0


def test_should_draw():
    assert not Style().should_draw_stroke()
    assert Style(stroke_color=COLOR_WHITE, stroke_width=1.0).should_draw_stroke()
    assert not Style(stroke_color=COLOR_WHITE).should_draw_stroke()
    assert Style(fill_color=COLOR_WHITE).should_draw_fill()
    assert not Style().should_draw_fill()
    assert Style(dot_color=COLOR_WHITE, dot_width=2.0).should_draw_dot()
    assert Style(dot_color_provider=lambda *a: Color()).should_draw_dot()
    assert not Style(dot_color=COLOR_WHITE).should_draw_dot()


def test_hidden_and_shown():
    assert hidden().hidden is True
    assert shown().hidden is False
    assert shown().is_zero()


def test_str():
    assert str(Style()) == "{}"
    text = str(_full_style())
    assert text.startswith('{"hidden": false')
    assert '"stroke_width": 5.00' in text
    assert '"stroke_color": rgba(255,255,255,1.0)' in text


@pytest.mark.parametrize("dashes", [[1.0, 2.5]])
def test_str_dash_array(dashes):
    assert '"stroke_dash_array": [1.00, 2.50]' in str(Style(stroke_width=1.0, stroke_dash_array=dashes))