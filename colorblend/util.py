#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
# pylint: disable=invalid-name
"""
Various helper functions that are used across the library.
"""
import re

from numpy import interp


CHANNEL_MAX = 255


def clamp(value, min_, max_):
    """
    Constrain a value to the specified range

    :param value: Input value
    :param min_: Range minimum
    :param max_: Range maximum

    :return: The constrained value
    """
    return max(min_, min(value, max_))


def scale(value, src_min, src_max, dst_min, dst_max, round_=False):
    """
    Scale a value from one range to another.

    :param value: Input value
    :param src_min: Min value of input range
    :param src_max: Max value of input range
    :param dst_min: Min value of output range
    :param dst_max: Max value of output range
    :param round_: True if the scale value should be rounded to an integer

    :return: The scaled value
    """
    scaled = interp(clamp(value, src_min, src_max), [src_min, src_max], [dst_min, dst_max])
    if round_:
        return int(round(scaled))

    return float(scaled)


def to_unit(value) -> float:
    """
    Convert an integer color channel (0 - 255) to a float (0.0 - 1.0)

    :param value: The channel value

    :return: The channel as a fraction
    """
    return value / float(CHANNEL_MAX)


def from_unit(value: float) -> int:
    """
    Convert a float color channel (0.0 - 1.0) to the nearest
    integer (0 - 255)

    :param value: The channel as a fraction

    :return: The integer channel value
    """
    return scale(value, 0.0, 1.0, 0, CHANNEL_MAX, round_=True)


def snake_to_camel(name: str) -> str:
    """
    Returns a camelCaseName from a snake_case_name
    """
    return re.sub(r'_([a-z])', lambda x: x.group(1).upper(), name)


def camel_to_snake(name: str) -> str:
    """
    Returns a snake_case_name from a camelCaseName
    """
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()
