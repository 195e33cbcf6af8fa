#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
Common types and enumerations which are used by everything.
"""

from enum import Enum
from typing import Callable, NamedTuple


class RGBA(NamedTuple):
    """
    A single color with an alpha channel.

    The color channels are either integers in the range 0-255 or
    floats in the range 0.0-1.0, depending on the domain used by
    the caller. Alpha is always a float between 0.0 and 1.0.
    """
    r: float
    g: float
    b: float
    a: float = 1.0

    @property
    def rgb(self) -> tuple:
        """
        The color channels without alpha
        """
        return (self.r, self.g, self.b)


class BlendKind(Enum):
    """
    The two shapes a blend function can take
    """
    SEPARABLE = "Applied independently to each color channel"
    NON_SEPARABLE = "Applied once to the whole RGB triple"

    @property
    def description(self):
        return self.value


class BlendFunc(NamedTuple):
    """
    A blend function tagged with its name and kind.

    Separable functions take (backdrop, source) channel values and
    return a channel value. Non-separable functions take (backdrop,
    source) RGB triples and return an RGB triple.
    """
    name: str
    kind: BlendKind
    func: Callable
    standard: bool = True

    def __call__(self, backdrop, source):
        return self.func(backdrop, source)


class BlendOptions(NamedTuple):
    """
    Channel domain options for the compositing engine
    """
    unit_input: bool = False
    unit_output: bool = False
