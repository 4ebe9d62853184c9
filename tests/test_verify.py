"""
tests/test_verify.py

Тесты проверки пути и перевода в прыжки.
"""

import pytest

from core.bitboard import ENGLISH_START, ENGLISH_GOAL, notation_to_pos
from core.moves import create_moves
from solutions.verify import (
    find_move, check_path, verify_path, path_to_jumps, replay, path_masks
)
from utils.error_handling import ValidationError


def test_valid_path(small_path, small_start):
    assert verify_path(small_path, start=small_start) is True
    check_path(small_path, start=small_start)


def test_wrong_start(small_path):
    """По умолчанию ожидается стандартная начальная доска."""
    assert verify_path(small_path) is False


def test_empty_path():
    assert verify_path([]) is False


def test_wrong_goal(small_path, small_start):
    with pytest.raises(ValidationError):
        check_path(small_path[:-1], start=small_start)


def test_skipped_step(small_path, small_start):
    """Пропуск доски ломает цепочку прыжков."""
    broken = small_path[:2] + small_path[3:]
    assert verify_path(broken, start=small_start) is False


def test_off_board_peg(small_path, small_start):
    broken = list(small_path)
    broken[2] |= 1
    assert verify_path(broken, start=small_start) is False


def test_three_bits_but_not_a_jump(small_start):
    """Три изменившиеся клетки не на одной линии."""
    before = small_start
    after = before ^ ((1 << 9) | (1 << 14) | (1 << 24))
    assert find_move(before, after) is None


def test_reverse_jump_rejected(small_path):
    """Ход назад по времени (колышков становится больше) не допустим."""
    assert find_move(small_path[1], small_path[0]) is None


def test_find_move(small_path):
    move = find_move(small_path[0], small_path[1])
    assert move is not None
    assert move.landing == 1 << 24
    assert move == create_moves(24, 31, 38)[0]


def test_path_to_jumps(small_path):
    """D6→D4, A3→C3, D4→B4, C2→C4, B4→D4."""
    jumps = path_to_jumps(small_path)
    expected = [("D6", "D5", "D4"), ("A3", "B3", "C3"), ("D4", "C4", "B4"),
                ("C2", "C3", "C4"), ("B4", "C4", "D4")]
    assert jumps == [tuple(notation_to_pos(cell) for cell in jump) for jump in expected]


def test_path_to_jumps_invalid(small_path):
    with pytest.raises(ValidationError):
        path_to_jumps([small_path[0], small_path[2]])


def test_replay(small_path):
    """Применение XOR-масок по порядку воспроизводит цель."""
    assert replay(small_path[0], path_masks(small_path)) == ENGLISH_GOAL
    assert replay(ENGLISH_START, []) == ENGLISH_START


def test_path_masks_have_three_bits(small_path):
    masks = path_masks(small_path)
    assert len(masks) == len(small_path) - 1
    assert all(mask.bit_count() == 3 for mask in masks)
