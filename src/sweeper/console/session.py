"""
Interactive console session.

Runs the loop that advances the turn, checks for a win, prints the
board, reads a command and applies it to the engine.
"""
import sys
from typing import Optional, TextIO

from ..game.board import (
    GameEngine,
    GameState,
    ImpossibleConfigurationError,
    MoveResult,
)
from .commands import Command, CommandError, CoordinateOrder, Verb, parse_command
from .render import render_board


PROMPT = " > "


# ============================================================================
# Console Session
# ============================================================================

class ConsoleSession:
    """
    Plays one engine through a text stream.

    Games started with ``n`` reuse the same engine, so the session ends
    only when a game is over, the player quits or input runs out.
    """

    def __init__(
        self,
        engine: GameEngine,
        order: CoordinateOrder = CoordinateOrder.ROW_FIRST,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            engine: Engine to play.
            order: Coordinate order used when parsing commands.
            input_stream: Where commands are read from (default stdin).
            output_stream: Where the board is printed (default stdout).
        """
        self.engine = engine
        self.order = order
        self.input = input_stream or sys.stdin
        self.output = output_stream or sys.stdout

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.output, flush=True)

    def play(self) -> GameState:
        """
        Run the game loop until the game ends or the player quits.

        Returns:
            State of the engine when the loop stopped.
        """
        while True:
            self.engine.advance_turn()
            if self.engine.check_win():
                self._print("You win!")
            self._print(render_board(self.engine), end="")

            if self.engine.game_over:
                self._print("Game over!")
                return self.engine.state

            command = self.read_command()
            if command.verb == Verb.QUIT:
                return self.engine.state
            self.apply(command)

    def read_command(self) -> Command:
        """
        Read lines until one holds a command that changes the game.

        Display commands are handled here. End of input counts as quit.
        """
        while True:
            self._print(PROMPT, end="")
            line = self.input.readline()
            if not line:
                return Command(Verb.QUIT)

            try:
                command = parse_command(
                    line, self.engine.width, self.engine.height, self.order
                )
            except CommandError as error:
                self._print(str(error))
                continue

            if command.verb == Verb.SHOW:
                self._print(render_board(self.engine), end="")
            elif command.verb == Verb.SHOW_ALL:
                self._print(render_board(self.engine, reveal=True), end="")
            else:
                return command

    def apply(self, command: Command) -> None:
        """Apply a REVEAL, FLAG or NEW command to the engine."""
        if command.verb == Verb.NEW:
            try:
                self.engine.new_game(command.x, command.y)
            except ImpossibleConfigurationError as error:
                self._print(str(error))
        elif command.verb == Verb.REVEAL:
            result = self.engine.reveal_cell(command.x, command.y)
            if result == MoveResult.FLAG_MISMATCH:
                self._print("Incorrect number of flags")
        elif command.verb == Verb.FLAG:
            self.engine.toggle_flag(command.x, command.y)
