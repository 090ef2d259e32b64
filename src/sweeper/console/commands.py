"""
Line-based command parsing for the console session.

Turns player input such as ``r 3 4`` into a :class:`Command` with
board coordinates, honoring the configured coordinate order.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple


# ============================================================================
# Constants
# ============================================================================

class CoordinateOrder(Enum):
    """Order in which players type the two coordinates."""

    ROW_FIRST = auto()
    COLUMN_FIRST = auto()


class Verb(Enum):
    """Actions a player can request."""

    REVEAL = auto()
    FLAG = auto()
    NEW = auto()
    QUIT = auto()
    SHOW = auto()
    SHOW_ALL = auto()


HELP_TEXT = (
    "Commands: r a b (reveal), f a b (flag), q (quit), "
    "n [width height] (new), p (print), P (print revealed)"
)


class CommandError(ValueError):
    """Raised when a line cannot be turned into a command."""


@dataclass(frozen=True)
class Command:
    """
    A parsed player command.

    Attributes:
        verb: Requested action.
        x: Column for REVEAL/FLAG, new width for NEW.
        y: Row for REVEAL/FLAG, new height for NEW.
    """

    verb: Verb
    x: Optional[int] = None
    y: Optional[int] = None


_VERBS = {
    "r": Verb.REVEAL,
    "f": Verb.FLAG,
    "m": Verb.FLAG,
    "n": Verb.NEW,
    "q": Verb.QUIT,
    "p": Verb.SHOW,
    "P": Verb.SHOW_ALL,
}


# ============================================================================
# Parsing
# ============================================================================

def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise CommandError(f"Not a number: {token!r}") from None


def _position(
    tokens: List[str], width: int, height: int, order: CoordinateOrder
) -> Tuple[int, int]:
    """Read two coordinates in the given order and bounds-check them."""
    if len(tokens) < 2:
        raise CommandError("Expected two coordinates")
    first, second = _to_int(tokens[0]), _to_int(tokens[1])
    if order == CoordinateOrder.ROW_FIRST:
        x, y = second, first
    else:
        x, y = first, second
    if not (0 <= x < width and 0 <= y < height):
        raise CommandError(
            f"Position ({x}, {y}) is outside the {width}x{height} board"
        )
    return x, y


def parse_command(
    line: str,
    width: int,
    height: int,
    order: CoordinateOrder = CoordinateOrder.ROW_FIRST,
) -> Command:
    """
    Parse one line of player input.

    A line starting with a number is shorthand for a reveal, so
    ``3 4`` is the same as ``r 3 4``.

    Args:
        line: Raw input line.
        width: Current board width, for bounds checking.
        height: Current board height, for bounds checking.
        order: How the two coordinates are ordered.

    Returns:
        The parsed command.

    Raises:
        CommandError: If the line is empty, unknown or malformed.
    """
    tokens = line.split()
    if not tokens:
        raise CommandError(f"Empty command. {HELP_TEXT}")

    head, rest = tokens[0], tokens[1:]
    if head.isdigit():
        x, y = _position(tokens, width, height, order)
        return Command(Verb.REVEAL, x, y)

    verb = _VERBS.get(head)
    if verb is None:
        raise CommandError(f"Unknown command. {HELP_TEXT}")

    if verb in (Verb.REVEAL, Verb.FLAG):
        x, y = _position(rest, width, height, order)
        return Command(verb, x, y)

    # Without two positive dimensions the new game keeps the current size.
    if verb == Verb.NEW and len(rest) >= 2:
        new_width, new_height = _to_int(rest[0]), _to_int(rest[1])
        if new_width > 0 and new_height > 0:
            return Command(verb, new_width, new_height)

    return Command(verb)
