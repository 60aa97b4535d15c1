"""
Move validator for console TicTacToe.
Turns what the player typed into a move and checks that it follows the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState, position_to_cell


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    row: Optional[int] = None
    col: Optional[int] = None

    @property
    def cell(self) -> Optional[Tuple[int, int]]:
        if self.row is None or self.col is None:
            return None
        return (self.row, self.col)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Positions are whole numbers from 1 to 9
    2. Can only place on empty cells
    3. Game must not be over
    """

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        size = GameConfig.BOARD_SIZE
        if not game_state.is_in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{size - 1}."
            )

        if not game_state.is_empty(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already taken by {game_state.board[row, col]}"
            )

        return ValidationResult(is_valid=True, row=row, col=col)

    def parse_position(self, game_state: GameState, text: str) -> ValidationResult:
        """
        Parse a typed board position (1-9) and validate it.

        Args:
            game_state: Current game state.
            text: Raw line typed by the player.

        Returns:
            ValidationResult carrying the target row/col when valid.
        """
        raw = text.strip()
        try:
            # int() would otherwise accept digit separators like "0_5"
            # and non-ASCII digits like "５"
            if "_" in raw or not raw.isascii():
                raise ValueError(raw)
            position = int(raw, 10)
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"'{raw}' is not a number."
            )

        if not 1 <= position <= GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Position {position} is out of range (1-{GameConfig.CELL_COUNT})."
            )

        row, col = position_to_cell(position)
        return self.validate_move(game_state, row, col)

    def is_quit_command(self, text: str) -> bool:
        """Check whether the player asked to leave the game."""
        return text.strip().lower() in GameConfig.QUIT_COMMANDS

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) valid move positions.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
