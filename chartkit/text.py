"""Text alignment options and line wrapping against a measuring function."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, NamedTuple


class TextExtent(NamedTuple):
    """Width and height of some text in pixels."""

    width: int
    height: int


Measure = Callable[[str], "tuple[int, int]"]


class TextHorizontalAlign(IntEnum):
    UNSET = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3


class TextWrap(IntEnum):
    UNSET = 0
    NONE = 1
    WORD = 2
    RUNE = 3


class TextVerticalAlign(IntEnum):
    UNSET = 0
    BASELINE = 1
    BOTTOM = 2
    MIDDLE = 3
    MIDDLE_BASELINE = 4
    TOP = 5


def trim(value: str) -> str:
    """Strip spaces, tabs and line breaks from both ends."""
    return value.strip(" \t\n\r")


def wrap_fit(measure: Measure, value: str, width: int, wrap: TextWrap) -> list[str]:
    """Split ``value`` into lines narrower than ``width`` using the given wrap mode."""
    if wrap == TextWrap.RUNE:
        return wrap_fit_rune(measure, value, width)
    if wrap == TextWrap.WORD:
        return wrap_fit_word(measure, value, width)
    return [value]


def wrap_fit_word(measure: Measure, value: str, width: int) -> list[str]:
    """Wrap on word boundaries; ``measure(text)`` returns (width, height)."""
    output: list[str] = []
    line = ""
    word = ""
    for char in value:
        if char == "\n":
            output.append(trim(line + word))
            line = word = ""
            continue
        if measure(line + word + char)[0] >= width:
            output.append(trim(line))
            line, word = word, char
            continue
        if char in " \t":
            line = line + word + char
            word = ""
            continue
        word += char
    output.append(trim(line + word))
    return output


def wrap_fit_rune(measure: Measure, value: str, width: int) -> list[str]:
    """Wrap at any character; the trailing remainder joins the last line."""
    output: list[str] = []
    line = ""
    for char in value:
        if char == "\n":
            output.append(line)
            line = ""
            continue
        if measure(line + char)[0] >= width:
            output.append(line)
            line = char
            continue
        line += char
    if not output:
        return [line]
    output[-1] += line
    return output


def measure_lines(measure: Measure, lines: list[str], line_spacing: int) -> TextExtent:
    """Return the extent of lines stacked vertically with ``line_spacing`` between them."""
    width = 0
    height = 0
    for index, line in enumerate(lines):
        line_width, line_height = measure(line)
        width = max(width, line_width)
        height += line_height
        if index < len(lines) - 1:
            height += line_spacing
    return TextExtent(width, height)