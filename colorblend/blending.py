#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
Compositing engine and blend mode registry.

Blending follows the W3C compositing-1 model: the blend function
decides the color where source and backdrop overlap, then the result
is composited with simple alpha compositing (source-over).

    ao = as + ab * (1 - as)
    co = ((1 - as) * ab * cb + as * ((1 - ab) * cs + ab * B(cb, cs))) / ao

Colors are straight (not premultiplied) RGBA.
"""

from frozendict import frozendict

from colorblend import nonseparable, separable
from colorblend.types import BlendFunc, BlendKind, BlendOptions, RGBA
from colorblend.util import camel_to_snake, from_unit, snake_to_camel, to_unit


def _separable(name: str, standard: bool = True) -> BlendFunc:
    return BlendFunc(name, BlendKind.SEPARABLE,
                     getattr(separable, camel_to_snake(name)), standard)


def _non_separable(name: str, standard: bool = True) -> BlendFunc:
    return BlendFunc(name, BlendKind.NON_SEPARABLE,
                     getattr(nonseparable, camel_to_snake(name)), standard)


# All blend modes, keyed by their exact name
BLEND_FUNCS = frozendict((func.name, func) for func in (
    _separable('normal'),
    _separable('multiply'),
    _separable('screen'),
    _separable('overlay'),
    _separable('darken'),
    _separable('lighten'),
    _separable('colorDodge'),
    _separable('colorBurn'),
    _separable('hardLight'),
    _separable('softLight'),
    _separable('difference'),
    _separable('exclusion'),
    _non_separable('hue'),
    _non_separable('saturation'),
    _non_separable('color'),
    _non_separable('luminosity'),

    # Not (yet) part of the W3C standard
    _separable('linearBurn', False),
    _separable('linearDodge', False),
    _non_separable('darkerColor', False),
    _non_separable('lighterColor', False),
    _separable('vividLight', False),
    _separable('linearLight', False),
    _separable('pinLight', False),
    _separable('hardMix', False),
    _separable('subtract', False),
    _separable('divide', False)))

BLEND_MODES = tuple(BLEND_FUNCS.keys())

STANDARD_MODES = tuple(name for name, func in BLEND_FUNCS.items() if func.standard)


def get_blend_func(mode) -> BlendFunc:
    """
    Look up a blend function

    :param mode: Exact mode name ("colorDodge"), its snake_case
                 alias ("color_dodge"), or a BlendFunc

    :return: The BlendFunc for the mode
    """
    if isinstance(mode, BlendFunc):
        return mode

    if isinstance(mode, str):
        if mode in BLEND_FUNCS:
            return BLEND_FUNCS[mode]

        camel = snake_to_camel(mode)
        if '_' in mode and camel in BLEND_FUNCS:
            return BLEND_FUNCS[camel]

    raise ValueError("Invalid blend mode: %s. Valid modes: %s" % (mode, list(BLEND_MODES)))


def _blend_channels(blend_func: BlendFunc, backdrop: tuple, source: tuple) -> tuple:
    if blend_func.kind is BlendKind.SEPARABLE:
        return tuple(blend_func.func(cb, cs) for cb, cs in zip(backdrop, source))

    if blend_func.kind is BlendKind.NON_SEPARABLE:
        return tuple(blend_func.func(backdrop, source))

    raise TypeError('Unknown blend function kind: %s' % (blend_func.kind,))


def _normalize(color: RGBA, unit_input: bool) -> RGBA:
    if unit_input:
        return RGBA(*color)
    return RGBA(to_unit(color[0]), to_unit(color[1]), to_unit(color[2]), color[3])


def _denormalize(color: RGBA, unit_output: bool) -> RGBA:
    if unit_output:
        return color
    return RGBA(from_unit(color.r), from_unit(color.g), from_unit(color.b), color.a)


def blend(backdrop: RGBA, source: RGBA, blend_func, options: BlendOptions = None) -> RGBA:
    """
    Composite source over backdrop using a blend function.

    Unless options.unit_input is set, the color channels of both
    inputs are integers from 0 to 255. The alpha channel is always
    a float from 0.0 to 1.0. Values outside of these ranges are not
    checked and give undefined results.

    :param backdrop: The background color
    :param source: The foreground color
    :param blend_func: A BlendFunc, or the name of a blend mode
    :param options: Input and output channel domains

    :return: A new RGBA with the composited color
    """
    if options is None:
        options = BlendOptions()

    blend_func = get_blend_func(blend_func)

    cb = _normalize(backdrop, options.unit_input)
    cs = _normalize(source, options.unit_input)

    if cs.a == 0:
        return _denormalize(cb, options.unit_output)

    alpha = cs.a + cb.a * (1 - cs.a)

    blended = _blend_channels(blend_func, cb.rgb, cs.rgb)

    channels = []
    for c_b, c_s, c_blend in zip(cb.rgb, cs.rgb, blended):
        if alpha > 0:
            mixed = (1 - cb.a) * c_s + cb.a * c_blend
            channels.append(((1 - cs.a) * cb.a * c_b + cs.a * mixed) / alpha)
        else:
            channels.append(0.0)

    return _denormalize(RGBA(*channels, alpha), options.unit_output)
