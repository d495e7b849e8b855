"""Small string helpers."""

from __future__ import annotations

_QUOTES = frozenset({'"', "'", "\u201c", "\u201d", "`"})
_CURLY_PAIRS = frozenset({("\u201c", "\u201d"), ("\u201d", "\u201c")})


def _matches_quote(opened: str, char: str) -> bool:
    return (opened, char) in _CURLY_PAIRS or opened == char


def split_csv(text: str) -> list[str]:
    """Split text on commas, trimming whitespace around each field.

    Quoted sections (straight, curly or back quotes) keep their commas and
    whitespace; the quote characters themselves are dropped.
    """
    output: list[str] = []
    word: list[str] = []
    opened: str | None = None

    for char in text:
        if opened is not None:
            if _matches_quote(opened, char):
                opened = None
            else:
                word.append(char)
        elif char in _QUOTES:
            opened = char
        elif char == ",":
            output.append("".join(word).strip())
            word = []
        else:
            word.append(char)

    if word:
        output.append("".join(word).strip())
    return output