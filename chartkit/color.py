"""RGBA colours and the viridis colour map."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour; the all-zero colour means "unset"."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def is_zero(self) -> bool:
        """Return True when every channel is zero."""
        return self.r == 0 and self.g == 0 and self.b == 0 and self.a == 0

    def __str__(self) -> str:
        return "rgba(%d,%d,%d,%.1f)" % (self.r, self.g, self.b, self.a / 255)


COLOR_TRANSPARENT = Color()
COLOR_WHITE = Color(255, 255, 255, 255)
COLOR_BLACK = Color(0, 0, 0, 255)

_VIRIDIS_RGB = (
    (0x44, 0x01, 0x54), (0x44, 0x02, 0x55), (0x45, 0x03, 0x57), (0x45, 0x05, 0x58),
    (0x45, 0x06, 0x5A), (0x46, 0x08, 0x5B), (0x46, 0x09, 0x5D), (0x46, 0x0B, 0x5E),
    (0x46, 0x0C, 0x60), (0x47, 0x0E, 0x61), (0x47, 0x0F, 0x62), (0x47, 0x11, 0x64),
    (0x47, 0x12, 0x65), (0x47, 0x14, 0x66), (0x48, 0x15, 0x68), (0x48, 0x16, 0x69),
    (0x48, 0x18, 0x6A), (0x48, 0x19, 0x6C), (0x48, 0x1A, 0x6D), (0x48, 0x1C, 0x6E),
    (0x48, 0x1D, 0x6F), (0x48, 0x1E, 0x70), (0x48, 0x20, 0x71), (0x48, 0x21, 0x73),
    (0x48, 0x22, 0x74), (0x48, 0x24, 0x75), (0x48, 0x25, 0x76), (0x48, 0x26, 0x77),
    (0x48, 0x27, 0x78), (0x47, 0x29, 0x79), (0x47, 0x2A, 0x79), (0x47, 0x2B, 0x7A),
    (0x47, 0x2C, 0x7B), (0x47, 0x2E, 0x7C), (0x46, 0x2F, 0x7D), (0x46, 0x30, 0x7E),
    (0x46, 0x31, 0x7E), (0x46, 0x33, 0x7F), (0x45, 0x34, 0x80), (0x45, 0x35, 0x81),
    (0x45, 0x36, 0x81), (0x44, 0x38, 0x82), (0x44, 0x39, 0x83), (0x44, 0x3A, 0x83),
    (0x43, 0x3B, 0x84), (0x43, 0x3C, 0x84), (0x43, 0x3E, 0x85), (0x42, 0x3F, 0x85),
    (0x42, 0x40, 0x86), (0x41, 0x41, 0x86), (0x41, 0x42, 0x87), (0x41, 0x43, 0x87),
    (0x40, 0x45, 0x88), (0x40, 0x46, 0x88), (0x3F, 0x47, 0x88), (0x3F, 0x48, 0x89),
    (0x3E, 0x49, 0x89), (0x3E, 0x4A, 0x89), (0x3D, 0x4B, 0x8A), (0x3D, 0x4D, 0x8A),
    (0x3C, 0x4E, 0x8A), (0x3C, 0x4F, 0x8A), (0x3B, 0x50, 0x8B), (0x3B, 0x51, 0x8B),
    (0x3A, 0x52, 0x8B), (0x3A, 0x53, 0x8B), (0x39, 0x54, 0x8C), (0x39, 0x55, 0x8C),
    (0x38, 0x56, 0x8C), (0x38, 0x57, 0x8C), (0x37, 0x58, 0x8C), (0x37, 0x59, 0x8C),
    (0x36, 0x5B, 0x8D), (0x36, 0x5C, 0x8D), (0x35, 0x5D, 0x8D), (0x35, 0x5E, 0x8D),
    (0x34, 0x5F, 0x8D), (0x34, 0x60, 0x8D), (0x33, 0x61, 0x8D), (0x33, 0x62, 0x8D),
    (0x33, 0x63, 0x8D), (0x32, 0x64, 0x8E), (0x32, 0x65, 0x8E), (0x31, 0x66, 0x8E),
    (0x31, 0x67, 0x8E), (0x30, 0x68, 0x8E), (0x30, 0x69, 0x8E), (0x2F, 0x6A, 0x8E),
    (0x2F, 0x6B, 0x8E), (0x2F, 0x6C, 0x8E), (0x2E, 0x6D, 0x8E), (0x2E, 0x6E, 0x8E),
    (0x2D, 0x6F, 0x8E), (0x2D, 0x70, 0x8E), (0x2D, 0x70, 0x8E), (0x2C, 0x71, 0x8E),
    (0x2C, 0x72, 0x8E), (0x2B, 0x73, 0x8E), (0x2B, 0x74, 0x8E), (0x2B, 0x75, 0x8E),
    (0x2A, 0x76, 0x8E), (0x2A, 0x77, 0x8E), (0x29, 0x78, 0x8E), (0x29, 0x79, 0x8E),
    (0x29, 0x7A, 0x8E), (0x28, 0x7B, 0x8E), (0x28, 0x7C, 0x8E), (0x28, 0x7D, 0x8E),
    (0x27, 0x7E, 0x8E), (0x27, 0x7F, 0x8E), (0x26, 0x80, 0x8E), (0x26, 0x81, 0x8E),
    (0x26, 0x82, 0x8E), (0x25, 0x83, 0x8E), (0x25, 0x83, 0x8E), (0x25, 0x84, 0x8E),
    (0x24, 0x85, 0x8E), (0x24, 0x86, 0x8E), (0x23, 0x87, 0x8E), (0x23, 0x88, 0x8E),
    (0x23, 0x89, 0x8E), (0x22, 0x8A, 0x8D), (0x22, 0x8B, 0x8D), (0x22, 0x8C, 0x8D),
    (0x21, 0x8D, 0x8D), (0x21, 0x8E, 0x8D), (0x21, 0x8F, 0x8D), (0x20, 0x90, 0x8D),
    (0x20, 0x91, 0x8C), (0x20, 0x92, 0x8C), (0x20, 0x93, 0x8C), (0x1F, 0x93, 0x8C),
    (0x1F, 0x94, 0x8C), (0x1F, 0x95, 0x8B), (0x1F, 0x96, 0x8B), (0x1F, 0x97, 0x8B),
    (0x1E, 0x98, 0x8B), (0x1E, 0x99, 0x8A), (0x1E, 0x9A, 0x8A), (0x1E, 0x9B, 0x8A),
    (0x1E, 0x9C, 0x89), (0x1E, 0x9D, 0x89), (0x1E, 0x9E, 0x89), (0x1E, 0x9F, 0x88),
    (0x1E, 0xA0, 0x88), (0x1F, 0xA1, 0x88), (0x1F, 0xA2, 0x87), (0x1F, 0xA3, 0x87),
    (0x1F, 0xA3, 0x86), (0x20, 0xA4, 0x86), (0x20, 0xA5, 0x86), (0x21, 0xA6, 0x85),
    (0x21, 0xA7, 0x85), (0x22, 0xA8, 0x84), (0x23, 0xA9, 0x83), (0x23, 0xAA, 0x83),
    (0x24, 0xAB, 0x82), (0x25, 0xAC, 0x82), (0x26, 0xAD, 0x81), (0x27, 0xAE, 0x81),
    (0x28, 0xAF, 0x80), (0x29, 0xAF, 0x7F), (0x2A, 0xB0, 0x7F), (0x2B, 0xB1, 0x7E),
    (0x2C, 0xB2, 0x7D), (0x2E, 0xB3, 0x7C), (0x2F, 0xB4, 0x7C), (0x30, 0xB5, 0x7B),
    (0x32, 0xB6, 0x7A), (0x33, 0xB7, 0x79), (0x35, 0xB7, 0x79), (0x36, 0xB8, 0x78),
    (0x38, 0xB9, 0x77), (0x39, 0xBA, 0x76), (0x3B, 0xBB, 0x75), (0x3D, 0xBC, 0x74),
    (0x3E, 0xBD, 0x73), (0x40, 0xBE, 0x72), (0x42, 0xBE, 0x71), (0x44, 0xBF, 0x70),
    (0x46, 0xC0, 0x6F), (0x48, 0xC1, 0x6E), (0x49, 0xC2, 0x6D), (0x4B, 0xC2, 0x6C),
    (0x4D, 0xC3, 0x6B), (0x4F, 0xC4, 0x6A), (0x51, 0xC5, 0x69), (0x53, 0xC6, 0x68),
    (0x55, 0xC6, 0x66), (0x58, 0xC7, 0x65), (0x5A, 0xC8, 0x64), (0x5C, 0xC9, 0x63),
    (0x5E, 0xC9, 0x62), (0x60, 0xCA, 0x60), (0x62, 0xCB, 0x5F), (0x65, 0xCC, 0x5E),
    (0x67, 0xCC, 0x5C), (0x69, 0xCD, 0x5B), (0x6C, 0xCE, 0x5A), (0x6E, 0xCE, 0x58),
    (0x70, 0xCF, 0x57), (0x73, 0xD0, 0x55), (0x75, 0xD0, 0x54), (0x77, 0xD1, 0x52),
    (0x7A, 0xD2, 0x51), (0x7C, 0xD2, 0x4F), (0x7F, 0xD3, 0x4E), (0x81, 0xD4, 0x4C),
    (0x84, 0xD4, 0x4B), (0x86, 0xD5, 0x49), (0x89, 0xD5, 0x48), (0x8B, 0xD6, 0x46),
    (0x8E, 0xD7, 0x44), (0x90, 0xD7, 0x43), (0x93, 0xD8, 0x41), (0x95, 0xD8, 0x3F),
    (0x98, 0xD9, 0x3E), (0x9B, 0xD9, 0x3C), (0x9D, 0xDA, 0x3A), (0xA0, 0xDA, 0x39),
    (0xA3, 0xDB, 0x37), (0xA5, 0xDB, 0x35), (0xA8, 0xDC, 0x33), (0xAB, 0xDC, 0x32),
    (0xAD, 0xDD, 0x30), (0xB0, 0xDD, 0x2E), (0xB3, 0xDD, 0x2D), (0xB5, 0xDE, 0x2B),
    (0xB8, 0xDE, 0x29), (0xBB, 0xDF, 0x27), (0xBD, 0xDF, 0x26), (0xC0, 0xDF, 0x24),
    (0xC3, 0xE0, 0x23), (0xC5, 0xE0, 0x21), (0xC8, 0xE1, 0x20), (0xCB, 0xE1, 0x1E),
    (0xCD, 0xE1, 0x1D), (0xD0, 0xE2, 0x1C), (0xD3, 0xE2, 0x1B), (0xD5, 0xE2, 0x1A),
    (0xD8, 0xE3, 0x19), (0xDB, 0xE3, 0x18), (0xDD, 0xE3, 0x18), (0xE0, 0xE4, 0x18),
    (0xE2, 0xE4, 0x18), (0xE5, 0xE4, 0x18), (0xE8, 0xE5, 0x19), (0xEA, 0xE5, 0x19),
    (0xED, 0xE5, 0x1A), (0xEF, 0xE6, 0x1B), (0xF2, 0xE6, 0x1C), (0xF4, 0xE6, 0x1E),
    (0xF7, 0xE6, 0x1F), (0xF9, 0xE7, 0x21), (0xFB, 0xE7, 0x23), (0xFE, 0xE7, 0x24),
)

VIRIDIS_COLORS: tuple[Color, ...] = tuple(Color(r, g, b, 0xFF) for r, g, b in _VIRIDIS_RGB)


def viridis(v: float, vmin: float, vmax: float) -> Color:
    """Map ``v`` within [vmin, vmax] onto the viridis colour map."""
    if vmax == vmin:
        raise ValueError("viridis requires vmax to differ from vmin")
    normalized = (v - vmin) / (vmax - vmin)
    index = int(normalized * 255)
    return VIRIDIS_COLORS[min(max(index, 0), len(VIRIDIS_COLORS) - 1)]