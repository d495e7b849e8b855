"""Building blocks for charts: sequences, series, formatters, styles and SVG output."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "seq",
    "series",
    "stringutil",
    "style",
    "svg",
    "text",
    "tick",
    "timeutil",
    "value",
    "value_buffer",
    "value_formatter",
]