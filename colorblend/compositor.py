#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
Configurable compositor and layer stacking.
"""
from typing import NamedTuple

from traitlets import Bool, HasTraits, TraitError, Unicode, observe, validate

from colorblend.blending import blend, get_blend_func
from colorblend.color import to_rgba, ColorType
from colorblend.log import Log
from colorblend.types import BlendOptions, RGBA
from colorblend.util import from_unit, to_unit


class Layer(NamedTuple):
    """
    A color in a stack, with the mode and opacity used to blend it
    over whatever is below
    """
    color: ColorType
    blend_mode: str = 'normal'
    opacity: float = 1.0


class Compositor(HasTraits):
    """
    Blends colors using a configured blend mode and channel domains.

    The blend mode may be given by its exact name ("colorDodge") or
    its snake_case alias ("color_dodge"), it is always stored by the
    exact name.
    """
    blend_mode = Unicode(default_value='normal')
    unit_input = Bool(default_value=False)
    unit_output = Bool(default_value=False)

    def __init__(self, *args, **kwargs):
        self._logger = Log.get('colorblend.compositor')
        super(Compositor, self).__init__(*args, **kwargs)


    @validate('blend_mode')
    def _blend_mode_validate(self, proposal):
        try:
            return get_blend_func(proposal.value).name
        except ValueError as err:
            raise TraitError(str(err)) from err


    @observe('blend_mode')
    def _blend_mode_changed(self, change):
        self._logger.debug('Blend mode changed: %s -> %s', change.old, change.new)


    @property
    def options(self) -> BlendOptions:
        """
        The channel domains as engine options
        """
        return BlendOptions(unit_input=self.unit_input, unit_output=self.unit_output)


    def composite(self, backdrop: ColorType, source: ColorType, blend_mode: str = None) -> RGBA:
        """
        Blend source over backdrop

        :param backdrop: The background color
        :param source: The foreground color
        :param blend_mode: Mode to use instead of the configured one

        :return: The blended color
        """
        if blend_mode is None:
            blend_mode = self.blend_mode

        return blend(to_rgba(backdrop, self.unit_input), to_rgba(source, self.unit_input),
                     blend_mode, self.options)


    def _layer_color(self, layer: Layer) -> RGBA:
        color = to_rgba(layer.color, self.unit_input)
        if not self.unit_input:
            color = RGBA(to_unit(color.r), to_unit(color.g), to_unit(color.b), color.a)
        return color._replace(a=color.a * layer.opacity)


    def compose(self, layers: list) -> RGBA:
        """
        Flatten a list of layers into a single color

        Layers are blended by z-order, starting from the first. Each
        layer is blended over the result so far using its own blend
        mode, with its alpha scaled by its opacity. Intermediate results
        are kept at full precision, rounding happens only once at the end.

        :param layers: List of Layers, bottom first. None entries are
                       skipped.

        :return: The composited color, or None if there are no layers
        """
        layers = [layer for layer in layers if layer is not None]
        if not layers:
            return None

        unit = BlendOptions(unit_input=True, unit_output=True)

        out = self._layer_color(layers[0])
        for layer in layers[1:]:
            out = blend(out, self._layer_color(layer), layer.blend_mode, unit)

        self._logger.debug('Composed %d layers: %s', len(layers), out)

        if self.unit_output:
            return out
        return RGBA(from_unit(out.r), from_unit(out.g), from_unit(out.b), out.a)
