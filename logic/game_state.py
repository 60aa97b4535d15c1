"""
Game state management for console TicTacToe.
Tracks the board, current player, and move history.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


def _empty_board() -> np.ndarray:
    size = GameConfig.BOARD_SIZE
    return np.full((size, size), GameConfig.EMPTY_CELL, dtype="<U1")


def position_to_cell(position: int) -> Tuple[int, int]:
    """
    Convert a 1-9 board position into a (row, col) cell.

    Positions are numbered left to right, top to bottom.
    """
    if not 1 <= position <= GameConfig.CELL_COUNT:
        raise ValueError(f"Position {position} is out of range (1-{GameConfig.CELL_COUNT})")
    return divmod(position - 1, GameConfig.BOARD_SIZE)


def cell_to_position(row: int, col: int) -> int:
    """Convert a (row, col) cell into its 1-9 board position."""
    return row * GameConfig.BOARD_SIZE + col + 1


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (0-8)

    @property
    def position(self) -> int:
        return cell_to_position(self.row, self.col)


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board (which mark is in each cell)
    - Current player
    - Move history
    - Game status (ongoing, won, draw)
    """

    # The 3x3 board - "" means empty, otherwise "X" or "O"
    board: np.ndarray = field(default_factory=_empty_board)

    # Current player's turn - X always starts
    current_player: Player = Player(GameConfig.FIRST_PLAYER)

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Player] = None
    is_draw: bool = False
    is_game_over: bool = False

    def get_mark(self, row: int, col: int) -> Optional[Player]:
        """Get the player whose mark is in a cell, or None if it is empty."""
        mark = self.board[row, col]
        if mark == GameConfig.EMPTY_CELL:
            return None
        return Player(str(mark))

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and self.current_player == other.current_player
            and self.moves == other.moves
            and self.winner == other.winner
            and self.is_draw == other.is_draw
            and self.is_game_over == other.is_game_over
        )

    @staticmethod
    def is_in_bounds(row: int, col: int) -> bool:
        """Check that (row, col) names a real cell (no negative indexing)."""
        size = GameConfig.BOARD_SIZE
        return 0 <= row < size and 0 <= col < size

    def is_empty(self, row: int, col: int) -> bool:
        return self.board[row, col] == GameConfig.EMPTY_CELL

    def make_move(self, row: int, col: int) -> bool:
        """
        Place the current player's mark at the given cell and pass the turn.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            return False

        if not self.is_in_bounds(row, col):
            return False

        if not self.is_empty(row, col):
            return False

        self.board[row, col] = self.current_player.value

        self.moves.append(Move(
            player=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))

        # Winner/draw detection is done by the WinChecker
        self.current_player = self.current_player.opposite()

        return True

    def make_move_at(self, position: int) -> bool:
        """Make a move at a 1-9 board position."""
        row, col = position_to_cell(position)
        return self.make_move(row, col)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board, in reading order.

        Returns:
            List of (row, col) tuples.
        """
        empty = np.argwhere(self.board == GameConfig.EMPTY_CELL)
        return [(int(row), int(col)) for row, col in empty]

    def is_full(self) -> bool:
        """Check whether every cell holds a mark."""
        return not np.any(self.board == GameConfig.EMPTY_CELL)

    def count_marks(self, player: Player) -> int:
        return int(np.count_nonzero(self.board == player.value))

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )
