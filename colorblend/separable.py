#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
Separable blend modes.

Each function blends a single backdrop channel with a single source
channel. Both channels are floats between 0.0 and 1.0, and so is the
result. The same function is applied to the red, green and blue
channels independently.

The modes up to and including exclusion are defined by W3C
compositing-1, the rest are the common "extended" modes found in
image editors.
"""

import math

from colorblend.util import clamp


# pylint: disable=unused-argument
def normal(backdrop: float, source: float) -> float:
    """
    The source replaces the backdrop
    """
    return source


def multiply(backdrop: float, source: float) -> float:
    """
    Multiply the channels. The result is always at least as dark
    as either input.
    """
    return backdrop * source


def screen(backdrop: float, source: float) -> float:
    """
    Complement of multiplying the complements. The result is always
    at least as light as either input.
    """
    return backdrop + source - backdrop * source


def overlay(backdrop: float, source: float) -> float:
    """
    Hard light with the inputs swapped
    """
    return hard_light(source, backdrop)


def darken(backdrop: float, source: float) -> float:
    return min(backdrop, source)


def lighten(backdrop: float, source: float) -> float:
    return min(max(backdrop, source), 1)


def color_dodge(backdrop: float, source: float) -> float:
    """
    Brighten the backdrop to reflect the source.

    A black backdrop stays black, and a white source always
    produces white.
    """
    if backdrop == 0:
        return 0
    if source == 1:
        return 1
    return min(1, backdrop / (1 - source))


def color_burn(backdrop: float, source: float) -> float:
    """
    Darken the backdrop to reflect the source.

    A white backdrop stays white, and a black source always
    produces black.
    """
    if backdrop == 1:
        return 1
    if source == 0:
        return 0
    return 1 - min(1, (1 - backdrop) / source)


def hard_light(backdrop: float, source: float) -> float:
    """
    Multiply or screen depending on the source
    """
    if source <= 0.5:
        return multiply(backdrop, 2 * source)
    return screen(backdrop, 2 * source - 1)


def soft_light(backdrop: float, source: float) -> float:
    """
    Darken or lighten depending on the source, like a diffused
    spotlight on the backdrop.
    """
    if source <= 0.5:
        return backdrop - (1 - 2 * source) * backdrop * (1 - backdrop)

    if backdrop <= 0.25:
        d = ((16 * backdrop - 12) * backdrop + 4) * backdrop
    else:
        d = math.sqrt(backdrop)

    return backdrop + (2 * source - 1) * (d - backdrop)


def difference(backdrop: float, source: float) -> float:
    return abs(backdrop - source)


def exclusion(backdrop: float, source: float) -> float:
    """
    Like difference, but with lower contrast
    """
    return backdrop + source - 2 * backdrop * source


def linear_burn(backdrop: float, source: float) -> float:
    """
    Add the channels and subtract one, floored at zero
    """
    if backdrop + source < 1:
        return 0
    return backdrop + source - 1


def linear_dodge(backdrop: float, source: float) -> float:
    """
    Add the channels, capped at one
    """
    return min(1, backdrop + source)


def vivid_light(backdrop: float, source: float) -> float:
    """
    Color dodge or color burn depending on the source.

    Sources above one half dodge the backdrop, sources at or below
    one half burn it.
    """
    if source > 0.5:
        dodge = 2 * (source - 0.5)
        if dodge == 1:
            return dodge
        return min(1, backdrop / (1 - dodge))

    if source == 0:
        return 0

    return max(0, 1 - (1 - backdrop) / (2 * source))


def linear_light(backdrop: float, source: float) -> float:
    """
    Linear dodge or linear burn depending on the source
    """
    return clamp(backdrop + 2 * source - 1, 0, 1)


def pin_light(backdrop: float, source: float) -> float:
    """
    Replace the backdrop depending on the source.

    The backdrop is kept when it falls inside [2s - 1, 2s].
    """
    return min(max(backdrop, 2 * source - 1), 2 * source)


def hard_mix(backdrop: float, source: float) -> float:
    """
    Threshold vivid light, the result is always either 0 or 1
    """
    if vivid_light(backdrop, source) < 0.5:
        return 0
    return 1


def subtract(backdrop: float, source: float) -> float:
    return max(backdrop - source, 0)


def divide(backdrop: float, source: float) -> float:
    """
    Divide the backdrop by the source, capped at one.
    Dividing by zero yields one.
    """
    if source == 0:
        return 1
    return min(backdrop / source, 1)
