#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
"""
CLI command implementations.

Each command module registers itself via the COMMANDS list.
"""

from colorblend.client.commands.base import Command
from colorblend.client.commands.blend import BlendCommand
from colorblend.client.commands.modes import ModesCommand

# All available commands — order determines help output order
COMMANDS: list[type[Command]] = [
    BlendCommand,
    ModesCommand,
]
