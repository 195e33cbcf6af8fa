#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
Blend command — composite one color over another.
"""

from argparse import ArgumentParser, Namespace
from typing import ClassVar

from argcomplete.completers import ChoicesCompleter
from traitlets import TraitError

from colorblend.blending import BLEND_MODES
from colorblend.client.commands.base import Command
from colorblend.color import to_html, to_rgba
from colorblend.compositor import Compositor
from colorblend.log import Log
from colorblend.types import RGBA


def parse_color(arg: str, unit: bool = False) -> RGBA:
    """
    Parse a color given on the command line.

    Comma separated channels are taken as-is in the requested domain,
    anything else is handed to the color parser (hex codes, names).
    """
    if "," in arg:
        try:
            channels = [float(x) for x in arg.split(",")]
        except ValueError as err:
            raise TypeError(f"Unable to parse color from '{arg}'") from err
        return to_rgba(channels, unit)

    return to_rgba(arg, unit)


class BlendCommand(Command):
    """Composite a source color over a backdrop color."""

    name = "blend"
    help = "Blend two colors"
    aliases: ClassVar[list[str]] = ["b"]

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "backdrop",
            type=str,
            metavar="BACKDROP",
            help="background color",
        )
        parser.add_argument(
            "source",
            type=str,
            metavar="SOURCE",
            help="foreground color",
        )
        parser.add_argument(
            "-m",
            "--mode",
            type=str,
            default="normal",
            metavar="MODE",
            help="blend mode (default: normal)",
        ).completer = ChoicesCompleter(BLEND_MODES)
        parser.add_argument(
            "--unit",
            action="store_true",
            help="color channels are 0.0-1.0 instead of 0-255",
        )
        parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="only print the resulting hex color (for scripting)",
        )

    def run(self, args: Namespace) -> int:
        logger = Log.get("colorblend.client")

        try:
            compositor = Compositor(blend_mode=args.mode, unit_input=args.unit,
                                    unit_output=args.unit)
        except TraitError as err:
            return self.error(str(err))

        try:
            backdrop = parse_color(args.backdrop, args.unit)
            source = parse_color(args.source, args.unit)
        except TypeError as err:
            return self.error(str(err))

        logger.debug("Blending %s over %s with %s", source, backdrop, compositor.blend_mode)
        result = compositor.composite(backdrop, source)

        if args.quiet:
            self.print(to_html(result, args.unit))
            return 0

        self.print(self.out.heading(f"Blend mode: {self.out.mode(compositor.blend_mode)}"))
        self.print()
        for label, color in (("backdrop", backdrop), ("source", source), ("result", result)):
            self.print(self.out.color_row(label, color, args.unit))

        return 0
