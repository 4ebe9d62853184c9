"""
core/moves.py

Таблица ходов английской доски.

Ход описывается тремя масками:
- landing: клетка, которую занимает прыгнувший колышек (1 бит);
- vacated: две клетки, которые ход освобождает (2 бита);
- all: все три клетки (landing | vacated), переключаются одним XOR.

Каждая тройка соседних клеток креста по строке или столбцу даёт два хода
(прыжок в одну и в другую сторону), всего 76.
"""

import random
from typing import Callable, List, NamedTuple, Optional

from .bitboard import ENGLISH_VALID_POSITIONS, VALID_MASK, BOARD_SIZE, peg_count
from utils.error_handling import GeometryError

# Начала троек по горизонтали (шаг +1)
ROW_STARTS = [2, 9, 14, 15, 16, 17, 18, 21, 22, 23, 24, 25, 28, 29, 30, 31, 32, 37, 44]
# Начала троек по вертикали (шаг +7)
COL_STARTS = [2, 3, 4, 9, 10, 11, 14, 15, 16, 17, 18, 19, 20, 23, 24, 25, 30, 31, 32]

ROW_STEP = 1
COL_STEP = BOARD_SIZE

MOVE_COUNT = 2 * (len(ROW_STARTS) + len(COL_STARTS))


class Move(NamedTuple):
    """Один прыжок в битовом виде."""
    landing: int
    vacated: int
    all: int


Permutation = Callable[[List[Move]], List[Move]]


def derive_starts(step: int) -> List[int]:
    """
    Находит все начала троек подряд идущих клеток креста.

    Args:
        step: ROW_STEP (по строке) или COL_STEP (по столбцу)

    Returns:
        Отсортированный список позиций
    """
    starts = []
    for pos in sorted(ENGLISH_VALID_POSITIONS):
        # Тройка по строке не должна переходить на следующую строку
        if step == ROW_STEP and pos % BOARD_SIZE > BOARD_SIZE - 3:
            continue
        if pos + step in ENGLISH_VALID_POSITIONS and pos + 2 * step in ENGLISH_VALID_POSITIONS:
            starts.append(pos)
    return starts


def create_moves(bit1: int, bit2: int, bit3: int) -> List[Move]:
    """
    Два хода для трёх клеток на одной линии.

    Клетки должны идти подряд: bit2 между bit1 и bit3.
    """
    all_three = (1 << bit1) | (1 << bit2) | (1 << bit3)
    return [
        Move(landing=1 << bit1, vacated=(1 << bit2) | (1 << bit3), all=all_three),
        Move(landing=1 << bit3, vacated=(1 << bit2) | (1 << bit1), all=all_three),
    ]


def generate_moves() -> List[Move]:
    """
    Генерирует все 76 ходов в фиксированном порядке.

    Сначала горизонтальные тройки, затем вертикальные.
    Порядок детерминирован, перемешивание делает shuffle_moves().
    """
    moves: List[Move] = []
    for x in ROW_STARTS:
        moves.extend(create_moves(x, x + ROW_STEP, x + 2 * ROW_STEP))
    for y in COL_STARTS:
        moves.extend(create_moves(y, y + COL_STEP, y + 2 * COL_STEP))
    return moves


def shuffle_moves(moves: List[Move], permute: Optional[Permutation] = None,
                  rng: Optional[random.Random] = None) -> List[Move]:
    """
    Перемешивает таблицу ходов (сильно влияет на время поиска).

    Args:
        moves: исходная таблица (не изменяется)
        permute: своя перестановка, получает копию списка
        rng: источник случайности; по умолчанию модуль random

    Returns:
        Новый список ходов
    """
    shuffled = list(moves)
    if permute is not None:
        return list(permute(shuffled))
    if rng is None:
        random.shuffle(shuffled)
    else:
        rng.shuffle(shuffled)
    return shuffled


def seeded_permutation(seed: int) -> Permutation:
    """Перестановка с фиксированным зерном (для воспроизводимых запусков)."""
    def permute(moves: List[Move]) -> List[Move]:
        random.Random(seed).shuffle(moves)
        return moves
    return permute


def validate_moves(moves: List[Move]) -> None:
    """
    Проверяет геометрию таблицы ходов.

    Raises:
        GeometryError: ход задевает клетку вне креста, неверное число битов
            или клетки не лежат на одной линии
    """
    if len(moves) != MOVE_COUNT:
        raise GeometryError(f"Ожидалось {MOVE_COUNT} ходов, получено {len(moves)}")

    for move in moves:
        if peg_count(move.landing) != 1 or peg_count(move.vacated) != 2:
            raise GeometryError(f"Неверное число битов: {move}")
        if move.landing & move.vacated:
            raise GeometryError(f"landing пересекается с vacated: {move}")
        if move.all != move.landing | move.vacated:
            raise GeometryError(f"all != landing | vacated: {move}")
        if move.all & ~VALID_MASK:
            raise GeometryError(f"Ход задевает клетку вне доски: {move}")

        first = (move.all & -move.all).bit_length() - 1
        step = ROW_STEP if move.all >> first == 0b111 else COL_STEP
        expected = (1 << first) | (1 << (first + step)) | (1 << (first + 2 * step))
        if move.all != expected:
            raise GeometryError(f"Клетки хода не на одной линии: {move}")
        if step == ROW_STEP and first // BOARD_SIZE != (first + 2) // BOARD_SIZE:
            raise GeometryError(f"Ход переходит через край строки: {move}")
        # Средняя клетка никогда не бывает клеткой приземления
        if move.landing == 1 << (first + step):
            raise GeometryError(f"Приземление в средней клетке: {move}")
