#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
Root parser and global flags of the colorblend CLI.
"""

import logging
import sys
from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter

from colorblend.client.output import Output
from colorblend.log import Log
from colorblend.version import __version__


EPILOG = """\
Colors:
  '#336699'             Hex code
  red                   CSS color name
  100,150,200,0.5       Channels (0-255) with optional alpha

Examples:
  colorblend modes                           List blend modes
  colorblend blend '#646496' red -m multiply Multiply red over a backdrop
  colorblend blend 0.2,0.4,0.6 1,1,1 --unit  Normal blend with unit channels
"""


class BlendCLI:
    """
    Owns the argument parser and the output renderer.

    Commands attach themselves through add_subparsers(), parse_args()
    then applies --no-color and --debug before a command runs.
    """

    def __init__(self):
        self.out = Output()
        self._subparsers = None

        self.parser = ArgumentParser(
            prog="colorblend",
            description="Blend RGBA colors using W3C compositing blend modes",
            formatter_class=RawDescriptionHelpFormatter,
            epilog=EPILOG,
        )
        self.parser.add_argument("-v", "--version", action="version",
                                 version=f"colorblend {__version__}")
        self.parser.add_argument("--debug", action="store_true",
                                 help="log at debug level and show tracebacks")
        self.parser.add_argument("--no-color", action="store_true",
                                 help="disable colored output")

    def add_subparsers(self):
        """The container for command subparsers, created on first use."""
        if self._subparsers is None:
            self._subparsers = self.parser.add_subparsers(
                title="commands", dest="command", metavar="COMMAND")
        return self._subparsers

    def parse_args(self, args: list[str] | None = None) -> Namespace:
        """
        Parse a command line, sys.argv by default

        Color is disabled for loggers too when output is plain.
        """
        parsed = self.parser.parse_args(sys.argv[1:] if args is None else args)

        if parsed.no_color:
            self.out = Output(force_color=False)

        Log.enable_color(self.out.color_enabled)
        if parsed.debug:
            Log.set_level(logging.DEBUG)

        return parsed

    def error(self, message: str) -> None:
        print(self.out.error(message), file=sys.stderr)
