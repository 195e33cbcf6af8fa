#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
Conversion of the various color representations to RGBA.
"""
from collections.abc import Iterable, Mapping
from typing import Union

from colorblend.colorlib import Color
from colorblend.types import RGBA
from colorblend.util import from_unit, to_unit


# Type hint for anything to_rgba understands
ColorType = Union[RGBA, Color, str, Mapping, Iterable]


def rgba_from_tuple(arg) -> RGBA:
    """
    Convert a 3- or 4-tuple to RGBA. Alpha defaults to 1.0.

    :param arg: The tuple to convert

    :return: The RGBA color
    """
    values = tuple(arg)
    if len(values) in (3, 4):
        return RGBA(*values)

    raise TypeError('Unable to convert %s to color' % (values,))


def rgba_from_color(color: Color, unit: bool = False) -> RGBA:
    """
    Convert a parsed Color to RGBA in the requested domain
    """
    r, g, b, a = color.rgba
    if unit:
        return RGBA(r, g, b, a)
    return RGBA(from_unit(r), from_unit(g), from_unit(b), a)


def to_rgba(arg: ColorType, unit: bool = False) -> RGBA:
    """
    Convert various color representations to RGBA

    Handles RGBA, mappings with r/g/b(/a) keys, RGB(A) sequences,
    Color objects, hexcodes, CSS color functions and html color
    names. Sequences and mappings are taken to already be in the
    requested domain, strings and Color objects are converted to it.

    :param arg: The color
    :param unit: True if color channels should be 0.0 - 1.0 instead
                 of 0 - 255

    :return: The RGBA color
    """
    if isinstance(arg, RGBA):
        return arg

    if isinstance(arg, Color):
        return rgba_from_color(arg, unit)

    if isinstance(arg, str):
        try:
            color = Color.NewFromHtml(arg.strip())
        except ValueError as err:
            raise TypeError('Unable to parse color from \'%s\'' % arg) from err
        return rgba_from_color(color, unit)

    if isinstance(arg, Mapping):
        try:
            return RGBA(arg['r'], arg['g'], arg['b'], arg.get('a', 1.0))
        except KeyError as err:
            raise TypeError('Color mapping is missing channel %s' % err) from err

    if isinstance(arg, Iterable):
        return rgba_from_tuple(arg)

    raise TypeError('Unable to parse color from \'%s\' (%s)' % (arg, type(arg)))


def to_html(color: RGBA, unit: bool = False) -> str:
    """
    Format an RGBA color as a hex string

    Alpha is included only when the color is not fully opaque.

    :param color: The color
    :param unit: True if the color channels are 0.0 - 1.0

    :return: Hex color string
    """
    if unit:
        channels = color.rgb
    else:
        channels = [to_unit(x) for x in color.rgb]

    return Color.NewFromRgb(*channels, color.a).html
