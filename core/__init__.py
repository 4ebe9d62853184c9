"""
core - Ядро Peg Solitaire

Битовое представление доски и таблица ходов.
"""

from .bitboard import (
    BOARD_SIZE, ENGLISH_VALID_POSITIONS, CENTER_POS,
    VALID_MASK, ENGLISH_START, ENGLISH_GOAL,
    bit, peg_count, pos_to_coords, coords_to_pos, is_valid_cell, is_on_board,
    pos_to_notation, notation_to_pos
)
from .moves import (
    Move, ROW_STARTS, COL_STARTS, MOVE_COUNT,
    derive_starts, create_moves, generate_moves, shuffle_moves,
    seeded_permutation, validate_moves
)

__all__ = [
    'BOARD_SIZE', 'ENGLISH_VALID_POSITIONS', 'CENTER_POS',
    'VALID_MASK', 'ENGLISH_START', 'ENGLISH_GOAL',
    'bit', 'peg_count', 'pos_to_coords', 'coords_to_pos', 'is_valid_cell', 'is_on_board',
    'pos_to_notation', 'notation_to_pos',
    'Move', 'ROW_STARTS', 'COL_STARTS', 'MOVE_COUNT',
    'derive_starts', 'create_moves', 'generate_moves', 'shuffle_moves',
    'seeded_permutation', 'validate_moves',
]
