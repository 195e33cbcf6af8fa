#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
Common base for colorblend subcommands.
"""

from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace
from typing import ClassVar

from colorblend.client.cli_base import BlendCLI


class Command(ABC):
    """
    A subcommand of the colorblend CLI.

    Subclasses set ``name``, ``help`` and optionally ``aliases``, add
    their arguments in configure_parser() and do their work in run().
    """

    name: ClassVar[str]
    help: ClassVar[str]
    aliases: ClassVar[list[str]] = []

    def __init__(self, cli: BlendCLI):
        self.cli = cli

    @property
    def out(self):
        """The CLI's renderer, which --no-color may replace while parsing"""
        return self.cli.out

    @classmethod
    def register(cls, cli: BlendCLI) -> "Command":
        """
        Add a subparser for this command to the CLI

        Parsing a command line that selects the command stores the
        returned instance as ``cmd_instance``.
        """
        command = cls(cli)
        parser = cli.add_subparsers().add_parser(cls.name, help=cls.help, aliases=cls.aliases)
        command.configure_parser(parser)
        parser.set_defaults(cmd_instance=command)
        return command

    @abstractmethod
    def configure_parser(self, parser: ArgumentParser) -> None: ...

    @abstractmethod
    def run(self, args: Namespace) -> int:
        """Do the work and return the process exit code."""

    def print(self, *args, **kwargs):
        print(*args, **kwargs)

    def error(self, message: str) -> int:
        """Report a failure on stdout, returns exit code 1."""
        self.print(self.out.error(message))
        return 1
