"""
AI player for console TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import random
from enum import Enum
from typing import Optional, Tuple

from .config import GameConfig
from .game_state import GameState, Player
from .win_checker import WinChecker


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Some strategy
    HARD = 3      # Full minimax


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    On HARD the AI always plays optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(
        self,
        player: Player = Player.O,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[random.Random] = None,
        verbose: bool = False
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            difficulty: How strong the AI plays.
            rng: Random source for EASY/MEDIUM moves.
            verbose: Print search statistics after each move.
        """
        self.player = player
        self.difficulty = difficulty
        self.rng = rng or random.Random()
        self.verbose = verbose
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def choose_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        """Pick a move according to the difficulty level."""
        if self.difficulty == Difficulty.EASY:
            return self._get_random_move(game_state)
        if self.difficulty == Difficulty.MEDIUM:
            if self.rng.random() < GameConfig.MEDIUM_OPTIMAL_CHANCE:
                return self.get_best_move(game_state)
            return self._get_random_move(game_state)
        return self.get_best_move(game_state)

    def _get_random_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        if game_state.current_player != self.player or game_state.is_game_over:
            return None
        empty_cells = game_state.get_empty_cells()
        return self.rng.choice(empty_cells) if empty_cells else None

    def get_best_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            (row, col) of best move, or None if no moves available.
        """
        self.moves_evaluated = 0

        if game_state.current_player != self.player or game_state.is_game_over:
            return None

        valid_moves = game_state.get_empty_cells()

        if not valid_moves:
            return None

        if len(valid_moves) == 1:
            return valid_moves[0]

        # Centre is the strongest opening
        center = (GameConfig.BOARD_SIZE // 2, GameConfig.BOARD_SIZE // 2)
        if len(valid_moves) == GameConfig.CELL_COUNT and center in valid_moves:
            return center

        best_score = float('-inf')
        best_move = valid_moves[0]

        for row, col in valid_moves:
            new_state = game_state.copy()
            new_state.make_move(row, col)

            score = self._minimax(new_state, depth=GameConfig.AI_SEARCH_DEPTH, is_maximizing=False)

            if score > best_score:
                best_score = score
                best_move = (row, col)

        if self.verbose:
            print(f"AI evaluated {self.moves_evaluated} positions. Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(
        self,
        game_state: GameState,
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            game_state: Current state to evaluate.
            depth: How deep to search.
            is_maximizing: True if maximizing player's turn.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        winner = self.win_checker.check_winner(game_state)

        if winner == self.player:
            return GameConfig.WIN_SCORE + depth  # Prefer faster wins
        elif winner == self.player.opposite():
            return -GameConfig.WIN_SCORE - depth  # Prefer slower losses
        elif self.win_checker.check_draw(game_state):
            return 0

        if depth == 0:
            return 0

        valid_moves = game_state.get_empty_cells()

        if not valid_moves:
            return 0

        if is_maximizing:
            max_score = float('-inf')
            for row, col in valid_moves:
                new_state = game_state.copy()
                new_state.make_move(row, col)
                score = self._minimax(new_state, depth - 1, False, alpha, beta)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for row, col in valid_moves:
                new_state = game_state.copy()
                new_state.make_move(row, col)
                score = self._minimax(new_state, depth - 1, True, alpha, beta)
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score
