"""
peg_io/visualizer.py

Вывод досок и решения в терминал.

Доска рисуется сеткой 7x7: пробел — клетка вне креста, X — колышек,
0 — пустая клетка. Клетки, изменившиеся с предыдущей доски, подсвечиваются.
"""

from typing import List, Optional, Sequence, Tuple

from core.bitboard import BOARD_SIZE, VALID_MASK, pos_to_notation
from core.moves import Move

PEG = 'X'
HOLE = '0'
EMPTY = ' '

COLOR_RESET = "\033[0m"
COLOR_RED = "\033[31m"
COLOR_CHANGED = "\033[33m"

SEPARATOR = "-" * 13
BOARD_GAP = "   "
DEFAULT_PER_ROW = 16


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{COLOR_RESET}" if enabled else text


def render_line(board: int, row: int, previous: Optional[int] = None, color: bool = True) -> str:
    """
    Одна строка доски.

    Args:
        board: доска
        row: номер строки (0..6)
        previous: предыдущая доска пути, для подсветки изменений
        color: использовать ANSI-цвета
    """
    changed = board ^ previous if previous is not None else 0
    cells = []
    cell = 1 << (BOARD_SIZE * row)
    for _ in range(BOARD_SIZE):
        if not cell & VALID_MASK:
            cells.append(EMPTY)
        elif cell & changed:
            cells.append(_paint(PEG if cell & board else HOLE, COLOR_CHANGED, color))
        elif cell & board:
            cells.append(_paint(PEG, COLOR_RED, color))
        else:
            cells.append(HOLE)
        cell <<= 1
    return "".join(cells)


def render_board(board: int, previous: Optional[int] = None, color: bool = True) -> str:
    """Доска целиком с разделителем."""
    lines = [render_line(board, row, previous, color) for row in range(BOARD_SIZE)]
    lines.append(SEPARATOR)
    return "\n".join(lines)


def render_path(path: Sequence[int], per_row: int = DEFAULT_PER_ROW, color: bool = True) -> str:
    """
    Путь решения: по per_row досок рядом, блоки разделены чертой.

    Каждая доска, кроме первой, подсвечивает клетки, изменённые ходом.
    """
    if per_row < 1:
        raise ValueError("per_row должен быть >= 1")

    blocks = []
    for first in range(0, len(path), per_row):
        chunk = range(first, min(first + per_row, len(path)))
        lines = []
        for row in range(BOARD_SIZE):
            parts = [
                render_line(path[i], row, path[i - 1] if i > 0 else None, color)
                for i in chunk
            ]
            lines.append(BOARD_GAP.join(parts))
        lines.append(SEPARATOR)
        blocks.append("\n".join(lines))
    return "\n".join(blocks)


def render_move(move: Move, color: bool = False) -> str:
    """Ход: landing, vacated и all рядом (для отладки таблицы ходов)."""
    lines = []
    for row in range(BOARD_SIZE):
        parts = [render_line(mask, row, color=color) for mask in move]
        lines.append(BOARD_GAP.join(parts))
    lines.append(SEPARATOR)
    return "\n".join(lines)


def format_jumps(jumps: List[Tuple[int, int, int]]) -> str:
    """
    Нумерованный список прыжков.

    Args:
        jumps: список (from, jumped, to)

    Returns:
        Форматированная строка
    """
    if not jumps:
        return "❌ Решение не найдено"

    lines = [f"✅ Найдено решение за {len(jumps)} ходов:"]
    for i, (from_pos, _, to_pos) in enumerate(jumps, 1):
        lines.append(f"  {i:2}. {pos_to_notation(from_pos)} → {pos_to_notation(to_pos)}")
    return "\n".join(lines)
