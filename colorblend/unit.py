#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
One function per blend mode, for colors with all channels in the
range 0.0 - 1.0.
"""

from colorblend.blending import BLEND_FUNCS
from colorblend.modes import mode_function
from colorblend.types import BlendOptions


OPTIONS = BlendOptions(unit_input=True, unit_output=True)

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
