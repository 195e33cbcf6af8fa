#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
from .blending import BLEND_FUNCS, BLEND_MODES, STANDARD_MODES, blend, get_blend_func
from .color import to_html, to_rgba
from .compositor import Compositor, Layer
from .types import BlendFunc, BlendKind, BlendOptions, RGBA
from .version import __version__
