"""An SVG renderer that records drawing commands as SVG markup."""

from __future__ import annotations

import io
import math
from typing import IO, Any, Optional

from chartkit.style import Style

DEFAULT_DPI = 92.0

_PI = math.pi
_PI2 = math.pi / 2.0
_TWO_PI = 2.0 * math.pi


def points_to_pixels(dpi: float, points: float) -> float:
    """Convert a size in points to pixels at the given DPI."""
    return points * dpi / 72.0


def radians_to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * (180.0 / math.pi)


def radian_add(base: float, delta: float) -> float:
    """Add two angles, wrapping the result into [0, 2*pi]."""
    value = base + delta
    if value > _TWO_PI:
        return math.fmod(value, _TWO_PI)
    if value < 0:
        return math.fmod(_TWO_PI + value, _TWO_PI)
    return value


def _font_family(font: Any) -> str:
    for attribute in ("family", "name"):
        value = getattr(font, attribute, None)
        if isinstance(value, str):
            return value
    return ""


class SvgCanvas:
    """Writes SVG elements into an in-memory text buffer."""

    def __init__(self, css: str = "", nonce: str = "", dpi: float = DEFAULT_DPI) -> None:
        self._buffer = io.StringIO()
        self.css = css
        self.nonce = nonce
        self.dpi = dpi
        self.text_theta: Optional[float] = None
        self.width = 0
        self.height = 0

    def _write(self, text: str) -> None:
        self._buffer.write(text)

    def start(self, width: int, height: int) -> None:
        """Open the document, embedding the stylesheet when one is set."""
        self.width = width
        self.height = height
        self._write(
            '<svg xmlns="http://www.w3.org/2000/svg" '
            'xmlns:xlink="http://www.w3.org/1999/xlink" '
            f'viewBox="0 0 {width} {height}">'
        )
        if self.css:
            self._write('<style type="text/css"')
            if self.nonce:
                self._write(f' nonce="{self.nonce}"')
            # CDATA keeps CSS selectors from clashing with XML syntax.
            self._write(f"><![CDATA[{self.css}]]></style>")

    def path(self, d: str, style: Style) -> None:
        """Write a path element with the given path data."""
        dash = self.get_stroke_dash_array(style) if style.stroke_dash_array else ""
        self._write(f'<path {dash} d="{d}" {self.style_as_svg(style)}/>')

    def text(self, x: int, y: int, body: str, style: Style) -> None:
        """Write a text element, rotated when a text rotation is set."""
        svg_style = self.style_as_svg(style)
        if self.text_theta is None:
            self._write(f'<text x="{x}" y="{y}" {svg_style}>{body}</text>')
        else:
            degrees = radians_to_degrees(self.text_theta)
            transform = ' transform="rotate(%0.2f,%d,%d)"' % (degrees, x, y)
            self._write(f'<text x="{x}" y="{y}" {svg_style}{transform}>{body}</text>')

    def circle(self, x: int, y: int, r: int, style: Style) -> None:
        """Write a circle element."""
        self._write(f'<circle cx="{x}" cy="{y}" r="{r}" {self.style_as_svg(style)}/>')

    def end(self) -> None:
        """Close the document."""
        self._write("</svg>")

    def get_stroke_dash_array(self, style: Style) -> str:
        """Return the stroke-dasharray attribute for a style, or ""."""
        if not style.stroke_dash_array:
            return ""
        values = ", ".join("%0.1f" % v for v in style.stroke_dash_array)
        return f'stroke-dasharray="{values}"'

    def _font_face(self, style: Style) -> str:
        family = "sans-serif"
        font = style.get_font()
        if font is not None:
            name = _font_family(font)
            if name:
                family = f"'{name}',{family}"
        return f"font-family:{family}"

    def style_as_svg(self, style: Style) -> str:
        """Return the style as an SVG class attribute or inline style attribute."""
        if style.class_name:
            classes = [style.class_name]
            if not style.stroke_color.is_zero():
                classes.append("stroke")
            if not style.fill_color.is_zero():
                classes.append("fill")
            if style.font_size != 0 or style.font is not None:
                classes.append("text")
            return 'class="%s"' % " ".join(classes)

        pieces = []
        if style.stroke_width != 0:
            pieces.append("stroke-width:%d" % int(style.stroke_width))
        else:
            pieces.append("stroke-width:0")

        if not style.stroke_color.is_zero():
            pieces.append(f"stroke:{style.stroke_color}")
        else:
            pieces.append("stroke:none")

        if not style.font_color.is_zero():
            pieces.append(f"fill:{style.font_color}")
        elif not style.fill_color.is_zero():
            pieces.append(f"fill:{style.fill_color}")
        else:
            pieces.append("fill:none")

        if style.font_size != 0:
            pieces.append("font-size:%.1fpx" % points_to_pixels(self.dpi, style.font_size))

        if style.font is not None:
            pieces.append(self._font_face(style))
        return 'style="%s"' % ";".join(pieces)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return self._buffer.getvalue()


class SvgRenderer:
    """Collects path commands and shapes into an SVG document.

    Drawing options are set on ``style``; text rotation (in radians) is set
    through ``text_rotation``.
    """

    def __init__(self, width: int, height: int, css: str = "", nonce: str = "") -> None:
        self.canvas = SvgCanvas(css=css, nonce=nonce)
        self.canvas.start(width, height)
        self.style = Style()
        self._path: list[str] = []
        self._dpi = DEFAULT_DPI

    @property
    def dpi(self) -> float:
        """Dots per inch used to turn font points into pixels."""
        return self._dpi

    @dpi.setter
    def dpi(self, value: float) -> None:
        self._dpi = value
        self.canvas.dpi = value

    @property
    def text_rotation(self) -> Optional[float]:
        """Rotation applied to text in radians, or None for none."""
        return self.canvas.text_theta

    @text_rotation.setter
    def text_rotation(self, radians: Optional[float]) -> None:
        self.canvas.text_theta = radians

    def reset_style(self) -> None:
        """Clear every style option except the font."""
        self.style = Style(font=self.style.font)

    def move_to(self, x: int, y: int) -> None:
        """Move the cursor to a point."""
        self._path.append(f"M {x} {y}")

    def line_to(self, x: int, y: int) -> None:
        """Draw a line to a point."""
        self._path.append(f"L {x} {y}")

    def quad_curve_to(self, cx: int, cy: int, x: int, y: int) -> None:
        """Draw a quadratic curve with control point (cx, cy)."""
        self._path.append(f"Q{cx},{cy} {x},{y}")

    def arc_to(
        self, cx: int, cy: int, rx: float, ry: float, start_angle: float, delta: float
    ) -> None:
        """Draw an arc around (cx, cy) from ``start_angle`` through ``delta`` radians."""
        start_angle = radian_add(start_angle, _PI2)
        end_angle = radian_add(start_angle, delta)

        start_x = cx + int(rx * math.sin(start_angle))
        start_y = cy - int(ry * math.cos(start_angle))
        command = "L" if self._path else "M"
        self._path.append(f"{command} {start_x} {start_y}")

        end_x = cx + int(rx * math.sin(end_angle))
        end_y = cy - int(ry * math.cos(end_angle))
        large_arc = 1 if delta > _PI else 0
        self._path.append(
            "A %d %d %0.2f %d 1 %d %d"
            % (int(rx), int(ry), radians_to_degrees(delta), large_arc, end_x, end_y)
        )

    def close(self) -> None:
        """Close the current shape."""
        self._path.append("Z")

    def _draw_path(self) -> None:
        self.canvas.path("\n".join(self._path), self.style.get_fill_and_stroke_options())
        self._path = []

    def stroke(self) -> None:
        """Emit the current path."""
        self._draw_path()

    def fill(self) -> None:
        """Emit the current path."""
        self._draw_path()

    def fill_stroke(self) -> None:
        """Emit the current path."""
        self._draw_path()

    def circle(self, radius: float, x: int, y: int) -> None:
        """Draw a circle at (x, y)."""
        self.canvas.circle(x, y, int(radius), self.style.get_fill_and_stroke_options())

    def text(self, body: str, x: int, y: int) -> None:
        """Draw text at (x, y)."""
        self.canvas.text(x, y, body, self.style.get_text_options())

    def save(self, stream: IO[Any]) -> None:
        """Close the document and write it to a text or binary stream."""
        self.canvas.end()
        content = self.canvas.getvalue()
        if isinstance(stream, io.TextIOBase):
            stream.write(content)
        else:
            try:
                stream.write(content)
            except TypeError:
                stream.write(content.encode("utf-8"))