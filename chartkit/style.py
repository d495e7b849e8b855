"""Drawing and text style settings with default coalescing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from chartkit.color import COLOR_TRANSPARENT, Color
from chartkit.text import TextHorizontalAlign, TextVerticalAlign, TextWrap

DISABLED = -1

DEFAULT_STROKE_WIDTH = 0.0
DEFAULT_DOT_WIDTH = 0.0
DEFAULT_FONT_SIZE = 10.0
DEFAULT_LINE_SPACING = 5

# Padding is (top, left, right, bottom) in pixels.
Padding = tuple[int, int, int, int]
ZERO_PADDING: Padding = (0, 0, 0, 0)

SizeProvider = Callable[..., float]
DotColorProvider = Callable[..., Color]


def _padding_is_zero(padding: Padding) -> bool:
    return not any(padding)


def _font_family(font: Any) -> str:
    for attribute in ("family", "name"):
        value = getattr(font, attribute, None)
        if isinstance(value, str):
            return value
    return str(font)


@dataclass
class Style:
    """A set of stroke, fill, dot and text options; zero values mean "unset"."""

    hidden: bool = False
    padding: Padding = ZERO_PADDING

    class_name: str = ""

    stroke_width: float = 0.0
    stroke_color: Color = COLOR_TRANSPARENT
    stroke_dash_array: Optional[list[float]] = None

    dot_color: Color = COLOR_TRANSPARENT
    dot_width: float = 0.0

    dot_width_provider: Optional[SizeProvider] = None
    dot_color_provider: Optional[DotColorProvider] = None

    fill_color: Color = COLOR_TRANSPARENT

    font_size: float = 0.0
    font_color: Color = COLOR_TRANSPARENT
    font: Any = None

    text_horizontal_align: TextHorizontalAlign = TextHorizontalAlign.UNSET
    text_vertical_align: TextVerticalAlign = TextVerticalAlign.UNSET
    text_wrap: TextWrap = TextWrap.UNSET
    text_line_spacing: int = 0
    text_rotation_degrees: float = 0.0

    def is_zero(self) -> bool:
        """Return True when none of the main options are set."""
        return (
            not self.hidden
            and self.stroke_color.is_zero()
            and self.stroke_width == 0
            and self.dot_color.is_zero()
            and self.dot_width == 0
            and self.fill_color.is_zero()
            and self.font_color.is_zero()
            and self.font_size == 0
            and self.font is None
            and self.class_name == ""
        )

    def __str__(self) -> str:
        if self.is_zero():
            return "{}"

        def null(key: str) -> str:
            return f'"{key}": null'

        output = ['"hidden": true' if self.hidden else '"hidden": false']
        output.append(
            f'"class_name": {self.class_name}' if self.class_name else null("class_name")
        )
        if not _padding_is_zero(self.padding):
            top, left, right, bottom = self.padding
            output.append(f'"padding": box({top},{left},{right},{bottom})')
        else:
            output.append(null("padding"))
        output.append(
            '"stroke_width": %0.2f' % self.stroke_width
            if self.stroke_width >= 0
            else null("stroke_width")
        )
        output.append(
            f'"stroke_color": {self.stroke_color}'
            if not self.stroke_color.is_zero()
            else null("stroke_color")
        )
        if self.stroke_dash_array:
            dashes = ", ".join("%.2f" % v for v in self.stroke_dash_array)
            output.append(f'"stroke_dash_array": [{dashes}]')
        else:
            output.append(null("stroke_dash_array"))
        output.append(
            '"dot_width": %0.2f' % self.dot_width if self.dot_width >= 0 else null("dot_width")
        )
        output.append(
            f'"dot_color": {self.dot_color}' if not self.dot_color.is_zero() else null("dot_color")
        )
        output.append(
            f'"fill_color": {self.fill_color}'
            if not self.fill_color.is_zero()
            else null("fill_color")
        )
        output.append(
            '"font_size": "%0.2fpt"' % self.font_size if self.font_size != 0 else null("font_size")
        )
        output.append(
            f'"font_color": {self.font_color}'
            if not self.font_color.is_zero()
            else null("font_color")
        )
        output.append(
            f'"font": "{_font_family(self.font)}"' if self.font is not None else null("font")
        )
        return "{" + ", ".join(output) + "}"

    def get_class_name(self, *args: str) -> str:
        """Return the class name, the first argument, or ""."""
        if self.class_name == "":
            return args[0] if args else ""
        return self.class_name

    def get_stroke_color(self, *args: Color) -> Color:
        """Return the stroke colour, the first argument, or transparent."""
        if self.stroke_color.is_zero():
            return args[0] if args else COLOR_TRANSPARENT
        return self.stroke_color

    def get_fill_color(self, *args: Color) -> Color:
        """Return the fill colour, the first argument, or transparent."""
        if self.fill_color.is_zero():
            return args[0] if args else COLOR_TRANSPARENT
        return self.fill_color

    def get_dot_color(self, *args: Color) -> Color:
        """Return the dot colour, the first argument, or transparent."""
        if self.dot_color.is_zero():
            return args[0] if args else COLOR_TRANSPARENT
        return self.dot_color

    def get_stroke_width(self, *args: float) -> float:
        """Return the stroke width, the first argument, or the default."""
        if self.stroke_width == 0:
            return args[0] if args else DEFAULT_STROKE_WIDTH
        return self.stroke_width

    def get_dot_width(self, *args: float) -> float:
        """Return the dot width, the first argument, or the default."""
        if self.dot_width == 0:
            return args[0] if args else DEFAULT_DOT_WIDTH
        return self.dot_width

    def get_stroke_dash_array(self, *args: Optional[list[float]]) -> Optional[list[float]]:
        """Return the dash array, the first argument, or None."""
        if not self.stroke_dash_array:
            return args[0] if args else None
        return self.stroke_dash_array

    def get_font_size(self, *args: float) -> float:
        """Return the font size, the first argument, or the default."""
        if self.font_size == 0:
            return args[0] if args else DEFAULT_FONT_SIZE
        return self.font_size

    def get_font_color(self, *args: Color) -> Color:
        """Return the font colour, the first argument, or transparent."""
        if self.font_color.is_zero():
            return args[0] if args else COLOR_TRANSPARENT
        return self.font_color

    def get_font(self, *args: Any) -> Any:
        """Return the font, the first argument, or None."""
        if self.font is None:
            return args[0] if args else None
        return self.font

    def get_padding(self, *args: Padding) -> Padding:
        """Return the padding, the first argument, or zero padding."""
        if _padding_is_zero(self.padding):
            return args[0] if args else ZERO_PADDING
        return self.padding

    def get_text_horizontal_align(self, *args: TextHorizontalAlign) -> TextHorizontalAlign:
        """Return the horizontal alignment, the first argument, or unset."""
        if self.text_horizontal_align == TextHorizontalAlign.UNSET:
            return args[0] if args else TextHorizontalAlign.UNSET
        return self.text_horizontal_align

    def get_text_vertical_align(self, *args: TextVerticalAlign) -> TextVerticalAlign:
        """Return the vertical alignment, the first argument, or unset."""
        if self.text_vertical_align == TextVerticalAlign.UNSET:
            return args[0] if args else TextVerticalAlign.UNSET
        return self.text_vertical_align

    def get_text_wrap(self, *args: TextWrap) -> TextWrap:
        """Return the wrap mode, the first argument, or unset."""
        if self.text_wrap == TextWrap.UNSET:
            return args[0] if args else TextWrap.UNSET
        return self.text_wrap

    def get_text_line_spacing(self, *args: int) -> int:
        """Return the line spacing, the first argument, or the default."""
        if self.text_line_spacing == 0:
            return args[0] if args else DEFAULT_LINE_SPACING
        return self.text_line_spacing

    def get_text_rotation_degrees(self, *args: float) -> float:
        """Return the text rotation, or the first argument when unset."""
        if self.text_rotation_degrees == 0 and args:
            return args[0]
        return self.text_rotation_degrees

    def inherit_from(self, defaults: Style) -> Style:
        """Return a new style with unset options taken from ``defaults``."""
        return Style(
            class_name=self.get_class_name(defaults.class_name),
            stroke_color=self.get_stroke_color(defaults.stroke_color),
            stroke_width=self.get_stroke_width(defaults.stroke_width),
            stroke_dash_array=self.get_stroke_dash_array(defaults.stroke_dash_array),
            dot_color=self.get_dot_color(defaults.dot_color),
            dot_width=self.get_dot_width(defaults.dot_width),
            dot_width_provider=self.dot_width_provider,
            dot_color_provider=self.dot_color_provider,
            fill_color=self.get_fill_color(defaults.fill_color),
            font_color=self.get_font_color(defaults.font_color),
            font_size=self.get_font_size(defaults.font_size),
            font=self.get_font(defaults.font),
            padding=self.get_padding(defaults.padding),
            text_horizontal_align=self.get_text_horizontal_align(defaults.text_horizontal_align),
            text_vertical_align=self.get_text_vertical_align(defaults.text_vertical_align),
            text_wrap=self.get_text_wrap(defaults.text_wrap),
            text_line_spacing=self.get_text_line_spacing(defaults.text_line_spacing),
            text_rotation_degrees=self.get_text_rotation_degrees(defaults.text_rotation_degrees),
        )

    def get_stroke_options(self) -> Style:
        """Return only the stroke options."""
        return Style(
            class_name=self.class_name,
            stroke_dash_array=self.stroke_dash_array,
            stroke_color=self.stroke_color,
            stroke_width=self.stroke_width,
        )

    def get_fill_options(self) -> Style:
        """Return only the fill options."""
        return Style(class_name=self.class_name, fill_color=self.fill_color)

    def get_dot_options(self) -> Style:
        """Return the dot options as a fill and stroke style."""
        return Style(
            class_name=self.class_name,
            stroke_dash_array=None,
            fill_color=self.dot_color,
            stroke_color=self.dot_color,
            stroke_width=1.0,
        )

    def get_fill_and_stroke_options(self) -> Style:
        """Return the fill and stroke options."""
        return Style(
            class_name=self.class_name,
            stroke_dash_array=self.stroke_dash_array,
            fill_color=self.fill_color,
            stroke_color=self.stroke_color,
            stroke_width=self.stroke_width,
        )

    def get_text_options(self) -> Style:
        """Return only the text options."""
        return Style(
            class_name=self.class_name,
            font_color=self.font_color,
            font_size=self.font_size,
            font=self.font,
            text_horizontal_align=self.text_horizontal_align,
            text_vertical_align=self.text_vertical_align,
            text_wrap=self.text_wrap,
            text_line_spacing=self.text_line_spacing,
            text_rotation_degrees=self.text_rotation_degrees,
        )

    def should_draw_stroke(self) -> bool:
        """Return True when a stroke colour and positive width are set."""
        return not self.stroke_color.is_zero() and self.stroke_width > 0

    def should_draw_dot(self) -> bool:
        """Return True when dots have a colour and width, or a provider is set."""
        return (
            (not self.dot_color.is_zero() and self.dot_width > 0)
            or self.dot_color_provider is not None
            or self.dot_width_provider is not None
        )

    def should_draw_fill(self) -> bool:
        """Return True when a fill colour is set."""
        return not self.fill_color.is_zero()


def hidden() -> Style:
    """Return a style with ``hidden`` set."""
    return Style(hidden=True)


def shown() -> Style:
    """Return a style with ``hidden`` cleared (the default)."""
    return Style(hidden=False)