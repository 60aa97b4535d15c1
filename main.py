"""
Main orchestration script for console TicTacToe.

This script ties together:
- Logic (game state, move validation, win checking, optional AI)
- UI (ASCII board rendering)

Run this script to play TicTacToe in the terminal!
"""

import argparse
from typing import Callable, Optional, Tuple

from logic.config import GameConfig
from logic.game_state import GameState, Player, cell_to_position
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer, Difficulty

from ui import BoardRenderer


class TicTacToeGame:
    """
    Main controller for a console TicTacToe game.

    Game flow:
    1. Show the board
    2. The current player types a position (1-9), re-prompted until valid
    3. Check for a winner, then for a full board
    4. Repeat until someone wins, it's a draw, or a player quits
    """

    def __init__(
        self,
        input_func: Optional[Callable[[], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        opponent: Optional[AIPlayer] = None,
        show_positions: bool = False
    ):
        """
        Initialize the game.

        Args:
            input_func: Reads one line typed by the player (default: input).
            output_func: Writes one block of text to the console (default: print).
            opponent: Computer player controlling one side, or None for
                two human players.
            show_positions: Print the numbered position guide before play.
        """
        self.input_func = input_func or input
        self.output_func = output_func or print
        self.opponent = opponent
        self.show_positions = show_positions

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.renderer = BoardRenderer()

        self.quit_requested = False

    def play(self) -> GameState:
        """
        Run the game loop until it is over or a player quits.

        Returns:
            The final game state.
        """
        if self.show_positions:
            self.output_func(self.renderer.render_position_guide())

        while not self.game_state.is_game_over:
            self.display()

            move = self._next_move()
            if move is None:
                self.quit_requested = True
                self.output_func("\nGame quit by user.")
                break

            row, col = move
            self.game_state.make_move(row, col)
            self.win_checker.update_game_state(self.game_state)

        if self.game_state.is_game_over:
            self._show_game_result()

        return self.game_state

    def display(self):
        """Print the current board."""
        self.output_func(self.renderer.render(self.game_state))

    def _next_move(self) -> Optional[Tuple[int, int]]:
        """Get the current player's move, from the AI or the keyboard."""
        if self.opponent is not None and self.game_state.current_player == self.opponent.player:
            return self._computer_move()
        return self._human_move()

    def _human_move(self) -> Optional[Tuple[int, int]]:
        """
        Prompt the current player until they enter a valid position.

        Returns:
            (row, col) of the move, or None if the player quit or input ended.
        """
        player = self.game_state.current_player
        while True:
            self.output_func(GameConfig.PROMPT_MESSAGE.format(player=player.value))
            try:
                text = self.input_func()
            except EOFError:
                return None

            if self.validator.is_quit_command(text):
                return None

            result = self.validator.parse_position(self.game_state, text)
            if result.is_valid:
                return result.cell

            self.output_func(GameConfig.INVALID_INPUT_MESSAGE)

    def _computer_move(self) -> Optional[Tuple[int, int]]:
        move = self.opponent.choose_move(self.game_state)
        if move is None:
            return None

        row, col = move
        self.output_func(
            f"Computer ({self.opponent.player.value}) plays position {cell_to_position(row, col)}"
        )
        return move

    def _show_game_result(self):
        """Show the final board and result."""
        self.display()
        self.output_func(self.renderer.render_result(self.game_state))

    def reset(self):
        """Reset the game for a new round."""
        self.game_state = GameState()
        self.quit_requested = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--vs-computer",
        action="store_true",
        help="Play against the computer instead of a second human"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X); implies --vs-computer"
    )
    parser.add_argument(
        "--difficulty",
        choices=[level.name.lower() for level in Difficulty],
        default=Difficulty.HARD.name.lower(),
        help="Computer strength (default: hard)"
    )
    parser.add_argument(
        "--show-positions",
        action="store_true",
        help="Print the 1-9 position guide before the first move"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print AI search statistics"
    )
    return parser


def create_opponent(args: argparse.Namespace) -> Optional[AIPlayer]:
    """Build the computer player requested on the command line, if any."""
    if not (args.vs_computer or args.computer_first):
        return None

    computer_player = Player.X if args.computer_first else Player.O
    return AIPlayer(
        player=computer_player,
        difficulty=Difficulty[args.difficulty.upper()],
        verbose=args.verbose
    )


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    game = TicTacToeGame(
        opponent=create_opponent(args),
        show_positions=args.show_positions
    )

    try:
        game.play()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print(GameConfig.GOODBYE_MESSAGE)


if __name__ == "__main__":
    main()
