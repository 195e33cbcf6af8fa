#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
ColorAide Color with the conversions colorblend needs.

Everything here works in sRGB with channels and alpha as 0.0 - 1.0
floats; colorblend.color handles the 0 - 255 domain.
"""

from coloraide import Color as _BaseColor


class Color(_BaseColor):
    """sRGB-centric Color with factory methods in the grapefruit style."""

    @classmethod
    def NewFromHtml(cls, html: str) -> "Color":
        """
        Parse a hex code ('#336699', '#369', '#33669980'), a CSS color
        function ('rgb(51 102 153 / 0.5)') or a CSS color name.

        Raises ValueError if the string is not a color.
        """
        return cls(html)

    @classmethod
    def NewFromRgb(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        color = cls("srgb", [r, g, b])
        color["alpha"] = a
        return color

    @property
    def rgba(self) -> tuple:
        """(r, g, b, a) in sRGB, converting from other spaces if needed"""
        srgb = self if self.space() == "srgb" else self.convert("srgb")
        return (srgb["red"], srgb["green"], srgb["blue"], srgb.alpha())

    @property
    def html(self) -> str:
        """Hex code, with alpha digits only when translucent"""
        return self.convert("srgb").to_string(hex=True)
