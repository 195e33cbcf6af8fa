#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
CLI main entry point.

Run with:
    python -m colorblend.client.main
    or via the 'colorblend' console script
"""

import sys

from argcomplete import autocomplete

from colorblend.client.cli_base import BlendCLI
from colorblend.client.commands import COMMANDS


def main(args: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    cli = BlendCLI()

    for cmd_cls in COMMANDS:
        cmd_cls.register(cli)

    autocomplete(cli.parser)

    parsed = cli.parse_args(args)

    if not hasattr(parsed, "cmd_instance"):
        cli.parser.print_help()
        return 0

    try:
        return parsed.cmd_instance.run(parsed)
    except KeyboardInterrupt:
        print()  # Clean line after ^C
        return 130
    except Exception as e:
        if parsed.debug:
            raise
        cli.error(str(e))
        return 1


def cli_entry() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
