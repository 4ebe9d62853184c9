"""
tests/test_visualizer.py

Тесты вывода досок в терминал.
"""

import pytest

from core.bitboard import ENGLISH_START, ENGLISH_GOAL, VALID_MASK
from core.moves import create_moves
from peg_io.visualizer import (
    COLOR_RED, COLOR_CHANGED, COLOR_RESET, SEPARATOR,
    render_line, render_board, render_path, render_move, format_jumps
)


def test_render_start_board():
    """Крест из X с пустым центром."""
    expected = "\n".join([
        "  XXX  ",
        "  XXX  ",
        "XXXXXXX",
        "XXX0XXX",
        "XXXXXXX",
        "  XXX  ",
        "  XXX  ",
        SEPARATOR,
    ])
    assert render_board(ENGLISH_START, color=False) == expected


def test_render_goal_line():
    assert render_line(ENGLISH_GOAL, 3, color=False) == "000X000"
    assert render_line(ENGLISH_GOAL, 0, color=False) == "  000  "


def test_render_line_colors_pegs():
    line = render_line(ENGLISH_GOAL, 3)
    assert line == "000" + COLOR_RED + "X" + COLOR_RESET + "000"


def test_render_line_highlights_changes():
    """Изменившиеся клетки подсвечиваются, остальные нет."""
    move = create_moves(22, 23, 24)[1]
    after = ENGLISH_START ^ move.all
    line = render_line(after, 3, previous=ENGLISH_START)
    assert line.count(COLOR_CHANGED) == 3
    assert line.count(COLOR_RED) == 4


def test_render_path_layout():
    """По per_row досок в ряд, разделитель после каждого блока."""
    path = [ENGLISH_START, ENGLISH_START, ENGLISH_START]
    text = render_path(path, per_row=2, color=False)
    lines = text.split("\n")

    assert len(lines) == 16
    assert lines[0] == "  XXX  " + "   " + "  XXX  "
    assert lines[7] == SEPARATOR
    assert lines[8] == "  XXX  "
    assert lines[15] == SEPARATOR


def test_render_path_single_block():
    text = render_path([ENGLISH_START, ENGLISH_GOAL], color=False)
    assert text.split("\n")[3] == "XXX0XXX" + "   " + "000X000"


def test_render_path_invalid_per_row():
    with pytest.raises(ValueError):
        render_path([ENGLISH_START], per_row=0)


def test_render_move():
    move = create_moves(22, 23, 24)[0]
    lines = render_move(move).split("\n")
    assert lines[3] == "0X00000" + "   " + "00XX000" + "   " + "0XXX000"


def test_render_valid_mask_full():
    assert "0" not in render_board(VALID_MASK, color=False)


def test_format_jumps():
    text = format_jumps([(22, 23, 24), (38, 31, 24)])
    assert "2 ходов" in text
    assert " 1. B4 → D4" in text
    assert " 2. D6 → D4" in text


def test_format_jumps_empty():
    assert "не найдено" in format_jumps([])
