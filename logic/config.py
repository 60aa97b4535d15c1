"""
Game configuration for console TicTacToe.
All the settings for the board, the console text, and the computer player.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak how the game looks and plays.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 positions, numbered 1-9

    # Marks
    FIRST_PLAYER = "X"
    EMPTY_CELL = ""       # How an empty cell is stored in the grid
    EMPTY_SYMBOL = " "    # How an empty cell is drawn

    # ==================== DISPLAY SETTINGS ====================
    BOARD_HEADER = "Current Board:"
    ROW_SEPARATOR = "---+---+---"
    POSITIONS_HEADER = "Positions:"

    # ==================== CONSOLE MESSAGES ====================
    PROMPT_MESSAGE = "Player {player}, enter a position (1-9):"
    INVALID_INPUT_MESSAGE = "Invalid input. Please try again."
    WIN_MESSAGE = "Player {player} wins!"
    DRAW_MESSAGE = "It's a draw!"
    GOODBYE_MESSAGE = "Goodbye!"

    # Typing any of these at the prompt ends the game
    QUIT_COMMANDS = ("q", "quit", "exit")

    # ==================== COMPUTER PLAYER ====================
    # Full game tree is 9 plies deep
    AI_SEARCH_DEPTH = 9
    WIN_SCORE = 10

    # Medium difficulty plays the best move this often, random otherwise
    MEDIUM_OPTIMAL_CHANCE = 0.5
