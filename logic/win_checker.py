"""
Win checker for console TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .config import GameConfig
from .game_state import GameState, Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(game_state.board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        board: np.ndarray,
        line: List[Tuple[int, int]]
    ) -> Optional[Player]:
        rows, cols = zip(*line)
        marks = board[list(rows), list(cols)]

        if marks[0] == GameConfig.EMPTY_CELL:
            return None
        if np.all(marks == marks[0]):
            return Player(str(marks[0]))
        return None

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw: every cell filled and nobody has a line.
        """
        if self.check_winner(game_state) is not None:
            return False

        return game_state.is_full()

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        winner = self.check_winner(game_state)

        if winner is not None:
            game_state.winner = winner
            game_state.is_game_over = True
        elif self.check_draw(game_state):
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state

    def get_winning_line(self, game_state: GameState) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(game_state.board, line) is not None:
                return line
        return None
