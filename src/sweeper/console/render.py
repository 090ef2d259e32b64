"""
Text rendering of the board for the console session.
"""
from typing import List

from ..game.board import GameEngine
from ..game.cell import Cell


def _render_cell(cell: Cell, game_over: bool, reveal: bool) -> str:
    """Render one cell as a four character field."""
    if game_over and cell.is_mine:
        return " [X]"
    if cell.is_flagged:
        if reveal and cell.is_mine:
            return " [x]"
        return " [!]"
    if reveal or cell.is_revealed:
        if cell.is_mine:
            return " [X]"
        if cell.neighbor_mines > 0:
            return f" {cell.neighbor_mines:>3}"
        return "    "
    return " [ ]"


def render_board(engine: GameEngine, reveal: bool = False) -> str:
    """
    Render the board with coordinates, the mine counter and the turn.

    Args:
        engine: Game to render.
        reveal: Show every cell's content, mines included.

    Returns:
        Multi-line string ending with a newline.
    """
    lines: List[str] = [f"Seed: {engine.seed:x}"]
    lines.append("     " + "".join(f" {x:>3}" for x in range(engine.width)))
    lines.append("   | " + "----" * engine.width)

    for y in range(engine.height):
        row = "".join(
            _render_cell(engine.get_cell(x, y), engine.game_over, reveal)
            for x in range(engine.width)
        )
        lines.append(f"{y:>3}| {row}")

    lines.append(
        f"   |  [{engine.mines_remaining:>5}] [{engine.turn:>5}]"
    )
    return "\n".join(lines) + "\n"
