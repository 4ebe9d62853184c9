"""
core/bitboard.py

Битовое представление английской доски (33 клетки) в одном int.

Доска 7x7 упакована построчно: бит row * 7 + col = 1, если в клетке колышек.
Клетки вне креста (углы) никогда не заняты.
"""

from typing import Tuple

from utils.error_handling import InvalidBoardError

BOARD_SIZE = 7

# Валидные позиции английской доски (33 клетки)
ENGLISH_VALID_POSITIONS = frozenset([
    2, 3, 4, 9, 10, 11,
    14, 15, 16, 17, 18, 19, 20,
    21, 22, 23, 24, 25, 26, 27,
    28, 29, 30, 31, 32, 33, 34,
    37, 38, 39, 44, 45, 46
])

CENTER_POS = 24

# Все 33 клетки заняты
VALID_MASK = sum(1 << pos for pos in ENGLISH_VALID_POSITIONS)
# Начальная позиция: пустой только центр
ENGLISH_START = VALID_MASK ^ (1 << CENTER_POS)
# Цель: один колышек в центре
ENGLISH_GOAL = 1 << CENTER_POS


def bit(pos: int) -> int:
    """Номер клетки → маска с одним битом."""
    return 1 << pos


def peg_count(board: int) -> int:
    """Количество колышков (popcount)."""
    return board.bit_count()


def pos_to_coords(pos: int) -> Tuple[int, int]:
    """Линейная позиция → (row, col)."""
    return pos // BOARD_SIZE, pos % BOARD_SIZE


def coords_to_pos(row: int, col: int) -> int:
    """(row, col) → линейная позиция."""
    return row * BOARD_SIZE + col


def is_valid_cell(row: int, col: int) -> bool:
    """Клетка (row, col) принадлежит кресту."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        return False
    return coords_to_pos(row, col) in ENGLISH_VALID_POSITIONS


def is_on_board(board: int) -> bool:
    """Все колышки стоят на клетках креста."""
    return board & ~VALID_MASK == 0


def pos_to_notation(pos: int) -> str:
    """Позиция → нотация (A1, B2, ...), D4 — центр."""
    row, col = pos_to_coords(pos)
    return f"{chr(col + ord('A'))}{row + 1}"


def notation_to_pos(text: str) -> int:
    """
    Нотация → позиция.

    Raises:
        InvalidBoardError: строка не разбирается или клетка вне креста
    """
    text = text.strip().upper()
    if len(text) != 2 or not text[0].isalpha() or not text[1].isdigit():
        raise InvalidBoardError(f"Некорректная клетка: {text!r}")

    row = int(text[1]) - 1
    col = ord(text[0]) - ord('A')
    if not is_valid_cell(row, col):
        raise InvalidBoardError(f"Клетка {text} вне доски")
    return coords_to_pos(row, col)
