"""
Console frontend for the sweeper engine.

Provides text rendering, command parsing and the interactive session.
"""
from .commands import Command, CommandError, CoordinateOrder, Verb, parse_command
from .render import render_board
from .session import ConsoleSession

__all__ = [
    "Command",
    "CommandError",
    "CoordinateOrder",
    "Verb",
    "parse_command",
    "render_board",
    "ConsoleSession",
]
