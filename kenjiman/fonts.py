"""Bitmap font identifiers and their metrics."""

from __future__ import annotations

from enum import Enum


class GlutFont(Enum):
    """The bitmap fonts available for text."""

    BITMAP_8_BY_13 = "8x13"
    BITMAP_9_BY_15 = "9x15"
    BITMAP_TIMES_ROMAN_10 = "times-roman-10"
    BITMAP_TIMES_ROMAN_24 = "times-roman-24"
    BITMAP_HELVETICA_10 = "helvetica-10"
    BITMAP_HELVETICA_12 = "helvetica-12"
    BITMAP_HELVETICA_18 = "helvetica-18"

    def height(self) -> int:
        """Line height in pixels."""
        return _METRICS[self][0]

    def text_width(self, text: str) -> int:
        """Width in pixels of the widest line of text.

        Exact for the fixed fonts; an average advance for the proportional ones.
        """
        advance = _METRICS[self][1]
        return max(len(line) for line in text.split("\n")) * advance

    @property
    def pixel_size(self) -> int:
        """Nominal glyph size, used to pick a matching system font."""
        return _METRICS[self][2]


# (line height, character advance, nominal size)
_METRICS: dict[GlutFont, tuple[int, int, int]] = {
    GlutFont.BITMAP_8_BY_13: (14, 8, 13),
    GlutFont.BITMAP_9_BY_15: (16, 9, 15),
    GlutFont.BITMAP_TIMES_ROMAN_10: (14, 5, 10),
    GlutFont.BITMAP_TIMES_ROMAN_24: (29, 11, 24),
    GlutFont.BITMAP_HELVETICA_10: (14, 5, 10),
    GlutFont.BITMAP_HELVETICA_12: (16, 7, 12),
    GlutFont.BITMAP_HELVETICA_18: (23, 10, 18),
}