"""
Console TicTacToe UI
Draws the board as ASCII text.

Shows:
- The live board (X, O, or blank per cell)
- A numbered guide of the 1-9 positions
- The end-of-game result
"""

from typing import Callable, List

from logic.config import GameConfig
from logic.game_state import GameState, cell_to_position


class BoardRenderer:
    """
    Renders the game board as text.

    Each row looks like ` X | O | X ` and is followed by `---+---+---`.
    """

    def render(self, game_state: GameState) -> str:
        """Render the current board, headed by a blank line and a title."""
        lines = ["", GameConfig.BOARD_HEADER]
        lines.extend(self._grid_lines(
            lambda row, col: self._symbol(game_state, row, col)
        ))
        return "\n".join(lines)

    def render_position_guide(self) -> str:
        """Render the board with each cell showing its 1-9 position."""
        lines = ["", GameConfig.POSITIONS_HEADER]
        lines.extend(self._grid_lines(
            lambda row, col: str(cell_to_position(row, col))
        ))
        return "\n".join(lines)

    def render_result(self, game_state: GameState) -> str:
        """Describe how the game ended (empty while it is still going)."""
        if game_state.winner is not None:
            return GameConfig.WIN_MESSAGE.format(player=game_state.winner.value)
        if game_state.is_draw:
            return GameConfig.DRAW_MESSAGE
        return ""

    def _grid_lines(self, cell_text: Callable[[int, int], str]) -> List[str]:
        lines = []
        for row in range(GameConfig.BOARD_SIZE):
            cells = [cell_text(row, col) for col in range(GameConfig.BOARD_SIZE)]
            lines.append(" " + " | ".join(cells) + " ")
            lines.append(GameConfig.ROW_SEPARATOR)
        return lines

    @staticmethod
    def _symbol(game_state: GameState, row: int, col: int) -> str:
        player = game_state.get_mark(row, col)
        return GameConfig.EMPTY_SYMBOL if player is None else player.value
