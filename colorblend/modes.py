#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
One function per blend mode, for colors with 8-bit channels.

Each function takes a backdrop and a source color with the color
channels as integers from 0 to 255 and alpha as a float from 0.0 to
1.0, and returns the blended color in the same form.

See colorblend.unit for the variants which use 0.0 - 1.0 for every
channel.
"""

from colorblend.blending import BLEND_FUNCS, blend
from colorblend.color import to_rgba, ColorType
from colorblend.types import BlendOptions, RGBA
from colorblend.util import camel_to_snake


def mode_function(name: str, options: BlendOptions):
    """
    Create the public function for a blend mode

    :param name: Exact name of the blend mode
    :param options: Channel domains used by the function

    :return: Function taking (backdrop, source) and returning RGBA
    """
    blend_func = BLEND_FUNCS[name]
    unit = options.unit_input

    def mode(backdrop: ColorType, source: ColorType) -> RGBA:
        return blend(to_rgba(backdrop, unit), to_rgba(source, unit), blend_func, options)

    if unit:
        domain = 'with all channels in the [0..1] range'
    else:
        domain = ('with the color channels being integers in the [0..255] range '
                  'and the alpha channel being a fraction in [0..1]')

    mode.__name__ = camel_to_snake(name)
    mode.__qualname__ = mode.__name__
    mode.__doc__ = """
    Blend two colors with the "%s" blend mode

    :param backdrop: The background color %s
    :param source: The foreground color %s

    :return: The blended color
    """ % (name, domain, domain)

    return mode


OPTIONS = BlendOptions(unit_input=False, unit_output=False)

MODE_FUNCTIONS = {name: mode_function(name, OPTIONS) for name in BLEND_FUNCS}

normal = MODE_FUNCTIONS['normal']
multiply = MODE_FUNCTIONS['multiply']
screen = MODE_FUNCTIONS['screen']
overlay = MODE_FUNCTIONS['overlay']
darken = MODE_FUNCTIONS['darken']
lighten = MODE_FUNCTIONS['lighten']
color_dodge = MODE_FUNCTIONS['colorDodge']
color_burn = MODE_FUNCTIONS['colorBurn']
hard_light = MODE_FUNCTIONS['hardLight']
soft_light = MODE_FUNCTIONS['softLight']
difference = MODE_FUNCTIONS['difference']
exclusion = MODE_FUNCTIONS['exclusion']
hue = MODE_FUNCTIONS['hue']
saturation = MODE_FUNCTIONS['saturation']
color = MODE_FUNCTIONS['color']
luminosity = MODE_FUNCTIONS['luminosity']
linear_burn = MODE_FUNCTIONS['linearBurn']
linear_dodge = MODE_FUNCTIONS['linearDodge']
darker_color = MODE_FUNCTIONS['darkerColor']
lighter_color = MODE_FUNCTIONS['lighterColor']
vivid_light = MODE_FUNCTIONS['vividLight']
linear_light = MODE_FUNCTIONS['linearLight']
pin_light = MODE_FUNCTIONS['pinLight']
hard_mix = MODE_FUNCTIONS['hardMix']
subtract = MODE_FUNCTIONS['subtract']
divide = MODE_FUNCTIONS['divide']
