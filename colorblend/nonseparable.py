#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
Non-separable blend modes.

These modes consider all color channels in combination. They work in
terms of the luminosity and saturation of an RGB triple, projecting
properties of one color onto another without a full conversion to
another color space. All triples are floats between 0.0 and 1.0.
"""

from typing import Sequence, Tuple


RGBTriple = Tuple[float, float, float]

# Luminosity coefficients for red, green and blue
LUM_WEIGHTS = (0.3, 0.59, 0.11)


def lum(color: Sequence[float]) -> float:
    """
    Perceptual luminosity of an RGB triple

    :param color: RGB triple

    :return: The luminosity between 0.0 and 1.0
    """
    return sum(w * c for w, c in zip(LUM_WEIGHTS, color))


def sat(color: Sequence[float]) -> float:
    """
    Saturation (chroma range) of an RGB triple

    :param color: RGB triple

    :return: Difference between the largest and smallest channel
    """
    return max(color) - min(color)


def clip_color(color: Sequence[float]) -> RGBTriple:
    """
    Bring an out-of-range RGB triple back into 0.0 - 1.0 while
    keeping its luminosity.

    Channels are pulled toward the luminosity of the color so the
    smallest channel lands at 0.0 and/or the largest at 1.0.

    :param color: RGB triple, possibly out of range

    :return: The clipped triple
    """
    l = lum(color)
    n = min(color)
    x = max(color)

    result = list(color)
    if n < 0 and l > n:
        result = [l + (c - l) * l / (l - n) for c in result]
    if x > 1 and x > l:
        result = [l + (c - l) * (1 - l) / (x - l) for c in result]

    return tuple(result)


def set_lum(color: Sequence[float], l: float) -> RGBTriple:
    """
    Shift an RGB triple to the given luminosity

    :param color: RGB triple
    :param l: Target luminosity

    :return: The adjusted and clipped triple
    """
    d = l - lum(color)
    return clip_color([c + d for c in color])


def set_sat(color: Sequence[float], s: float) -> RGBTriple:
    """
    Give an RGB triple the requested saturation

    The channels keep their relative order. The largest becomes s,
    the smallest becomes 0 and the middle one is scaled in between.
    A gray input (all channels equal) becomes black.

    :param color: RGB triple
    :param s: Target saturation

    :return: The new triple
    """
    order = sorted(range(3), key=lambda i: color[i])
    i_min, i_mid, i_max = order

    result = [0.0, 0.0, 0.0]
    c_max = color[i_max]
    c_min = color[i_min]
    if c_max > c_min:
        result[i_mid] = (color[i_mid] - c_min) * s / (c_max - c_min)
        result[i_max] = s

    return tuple(result)


def hue(backdrop: Sequence[float], source: Sequence[float]) -> RGBTriple:
    """
    Hue of the source with the saturation and luminosity of the backdrop
    """
    return set_lum(set_sat(source, sat(backdrop)), lum(backdrop))


def saturation(backdrop: Sequence[float], source: Sequence[float]) -> RGBTriple:
    """
    Saturation of the source with the hue and luminosity of the backdrop
    """
    return set_lum(set_sat(backdrop, sat(source)), lum(backdrop))


def color(backdrop: Sequence[float], source: Sequence[float]) -> RGBTriple:
    """
    Hue and saturation of the source with the luminosity of the backdrop
    """
    return set_lum(source, lum(backdrop))


def luminosity(backdrop: Sequence[float], source: Sequence[float]) -> RGBTriple:
    """
    Luminosity of the source with the hue and saturation of the backdrop
    """
    return set_lum(backdrop, lum(source))


def darker_color(backdrop: Sequence[float], source: Sequence[float]) -> RGBTriple:
    """
    Whichever color has the lower luminosity
    """
    if lum(source) < lum(backdrop):
        return tuple(source)
    return tuple(backdrop)


def lighter_color(backdrop: Sequence[float], source: Sequence[float]) -> RGBTriple:
    """
    Whichever color has the higher luminosity
    """
    if lum(backdrop) > lum(source):
        return tuple(backdrop)
    return tuple(source)
