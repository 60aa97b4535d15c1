"""
Logic module for console TicTacToe.
Handles game state, rules, and the computer opponent.
"""

from .config import GameConfig
from .game_state import GameState, Player, Move, position_to_cell, cell_to_position
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer, Difficulty

__version__ = "1.0.0"
