#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
Modes command — list the available blend modes.
"""

from argparse import ArgumentParser, Namespace
from typing import ClassVar

from colorblend.blending import BLEND_FUNCS
from colorblend.client.commands.base import Command


class ModesCommand(Command):
    """List blend modes."""

    name = "modes"
    help = "List blend modes"
    aliases: ClassVar[list[str]] = ["ls"]

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "-s",
            "--standard",
            action="store_true",
            help="only show modes defined by W3C compositing-1",
        )
        parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="only show mode names (for scripting)",
        )

    def run(self, args: Namespace) -> int:
        funcs = [f for f in BLEND_FUNCS.values() if f.standard or not args.standard]

        if args.quiet:
            for func in funcs:
                self.print(func.name)
            return 0

        self.print(self.out.heading(f"Blend modes ({len(funcs)})"))
        self.print()

        width = max(len(f.name) for f in funcs)
        for func in funcs:
            self.print(self.out.mode_entry(func, width))

        return 0
