"""
Tests for the console game loop, board rendering, and command line.
The loop is driven with scripted input instead of a real keyboard.
"""

import pytest

from logic.config import GameConfig
from logic.game_state import GameState, Player
from logic.ai_player import AIPlayer, Difficulty
from main import TicTacToeGame, build_parser, create_opponent, main
from ui import BoardRenderer


def scripted(lines):
    """Return an input function that replays lines, then raises EOFError."""
    remaining = list(lines)

    def read():
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


def run_game(lines, **kwargs):
    output = []
    game = TicTacToeGame(input_func=scripted(lines), output_func=output.append, **kwargs)
    state = game.play()
    return game, state, output


# ==================== RENDERING ====================

def test_render_empty_board():
    text = BoardRenderer().render(GameState())
    assert text == "\n".join([
        "",
        "Current Board:",
        "   |   |   ",
        "---+---+---",
        "   |   |   ",
        "---+---+---",
        "   |   |   ",
        "---+---+---",
    ])


def test_render_marks_in_row_major_order():
    state = GameState()
    state.make_move_at(1)
    state.make_move_at(5)
    state.make_move_at(9)
    lines = BoardRenderer().render(state).split("\n")
    assert lines[2] == " X |   |   "
    assert lines[4] == "   | O |   "
    assert lines[6] == "   |   | X "


def test_render_position_guide():
    lines = BoardRenderer().render_position_guide().split("\n")
    assert lines[1] == GameConfig.POSITIONS_HEADER
    assert lines[2] == " 1 | 2 | 3 "
    assert lines[4] == " 4 | 5 | 6 "
    assert lines[6] == " 7 | 8 | 9 "


# ==================== GAME LOOP ====================

def test_x_wins_top_row():
    _, state, output = run_game(["1", "4", "2", "5", "3"])
    assert state.winner == Player.X
    assert output[-1] == "Player X wins!"
    assert output[-2].split("\n")[2] == " X | X | X "
    assert state.is_game_over


def test_o_wins_column():
    _, state, output = run_game(["1", "2", "3", "5", "4", "8"])
    assert state.winner == Player.O
    assert output[-1] == "Player O wins!"


def test_draw_game():
    _, state, output = run_game(["1", "2", "3", "5", "4", "6", "8", "7", "9"])
    assert state.is_draw
    assert state.winner is None
    assert output[-1] == "It's a draw!"
    assert state.is_full()


def test_invalid_input_reprompts_same_player():
    _, state, output = run_game(["abc", "0", "10", "1", "1", "2"])
    assert output.count(GameConfig.INVALID_INPUT_MESSAGE) == 4
    assert state.get_mark(0, 0) == Player.X
    assert state.get_mark(0, 1) == Player.O
    prompts = [line for line in output if line.startswith("Player ") and "enter" in line]
    # X is asked four times before landing a move, O twice (one occupied cell)
    assert prompts[:4] == ["Player X, enter a position (1-9):"] * 4
    assert prompts[4:6] == ["Player O, enter a position (1-9):"] * 2


def test_board_shown_before_every_turn():
    _, _, output = run_game(["1", "4", "2", "5", "3"])
    boards = [block for block in output if "Current Board:" in block]
    # five turns plus the final board
    assert len(boards) == 6


def test_quit_command_stops_game():
    game, state, output = run_game(["5", "q"])
    assert game.quit_requested
    assert not state.is_game_over
    assert "Game quit by user." in output[-1]


def test_end_of_input_stops_game():
    game, state, _ = run_game(["5"])
    assert game.quit_requested
    assert len(state.moves) == 1


def test_show_positions_prints_guide_first():
    _, _, output = run_game(["q"], show_positions=True)
    assert GameConfig.POSITIONS_HEADER in output[0]


def test_hard_computer_blocks_then_never_loses():
    computer = AIPlayer(Player.O, difficulty=Difficulty.HARD)
    _, state, output = run_game(["1", "2", "9", "4", "6", "7", "8"], opponent=computer)
    assert any(line.startswith("Computer (O) plays position") for line in output)
    assert state.winner != Player.X


def test_computer_first_opens_in_center():
    computer = AIPlayer(Player.X)
    _, state, _ = run_game(["q"], opponent=computer)
    assert state.get_mark(1, 1) == Player.X
    assert state.current_player == Player.O


def test_reset_starts_new_round():
    game, _, _ = run_game(["1", "q"])
    game.reset()
    assert len(game.game_state.moves) == 0
    assert not game.quit_requested


# ==================== COMMAND LINE ====================

def test_default_args_are_two_humans():
    args = build_parser().parse_args([])
    assert create_opponent(args) is None


def test_vs_computer_plays_o():
    args = build_parser().parse_args(["--vs-computer", "--difficulty", "easy"])
    opponent = create_opponent(args)
    assert opponent.player == Player.O
    assert opponent.difficulty == Difficulty.EASY


def test_computer_first_plays_x():
    opponent = create_opponent(build_parser().parse_args(["--computer-first"]))
    assert opponent.player == Player.X
    assert opponent.difficulty == Difficulty.HARD


def test_show_positions_and_verbose_flags():
    args = build_parser().parse_args(["--vs-computer", "--show-positions", "--verbose"])
    assert args.show_positions
    opponent = create_opponent(args)
    assert opponent.verbose


def test_verbose_without_computer_has_no_opponent():
    args = build_parser().parse_args(["--verbose"])
    assert create_opponent(args) is None


def test_bad_difficulty_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--difficulty", "impossible"])


def test_main_plays_and_says_goodbye(monkeypatch, capsys):
    moves = iter(["1", "4", "2", "5", "3"])
    monkeypatch.setattr("builtins.input", lambda: next(moves))
    main([])
    out = capsys.readouterr().out
    assert "Player X wins!" in out
    assert out.rstrip().endswith(GameConfig.GOODBYE_MESSAGE)


def test_main_handles_ctrl_c(monkeypatch, capsys):
    def interrupt():
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)
    main([])
    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert GameConfig.GOODBYE_MESSAGE in out
