"""
solutions/verify.py

Проверка найденного пути и перевод его в прыжки (from, jumped, to).
"""

from typing import Iterable, List, Optional, Tuple

from core.bitboard import ENGLISH_START, ENGLISH_GOAL, VALID_MASK, peg_count
from core.moves import Move, generate_moves
from utils.error_handling import ValidationError

Jump = Tuple[int, int, int]


def _single_pos(mask: int) -> int:
    """Номер единственного установленного бита."""
    return mask.bit_length() - 1


def find_move(before: int, after: int, moves: Optional[List[Move]] = None) -> Optional[Move]:
    """
    Ищет ход, переводящий before в after прямым прыжком.

    Прыжок допустим, если обе клетки vacated заняты, а landing пуста.
    """
    if moves is None:
        moves = generate_moves()

    diff = before ^ after
    for move in moves:
        if move.all != diff:
            continue
        if (before & move.vacated) == move.vacated and (before & move.landing) == 0:
            return move
    return None


def check_path(path: List[int], moves: Optional[List[Move]] = None,
               start: int = ENGLISH_START, goal: int = ENGLISH_GOAL) -> None:
    """
    Проверяет путь и сообщает, что именно не так.

    Raises:
        ValidationError: первая найденная ошибка
    """
    if not path:
        raise ValidationError("Пустой путь")
    if path[0] != start:
        raise ValidationError("Путь должен начинаться с начальной доски")
    if path[-1] != goal:
        raise ValidationError("Путь должен заканчиваться целевой доской")

    if moves is None:
        moves = generate_moves()

    for step, board in enumerate(path):
        if board & ~VALID_MASK:
            raise ValidationError(f"Шаг {step}: колышек вне доски")

    for step, (before, after) in enumerate(zip(path, path[1:]), 1):
        if peg_count(before) - peg_count(after) != 1:
            raise ValidationError(f"Шаг {step}: число колышков должно уменьшиться на один")
        if peg_count(before ^ after) != 3:
            raise ValidationError(f"Шаг {step}: изменилось не три клетки")
        if find_move(before, after, moves) is None:
            raise ValidationError(f"Шаг {step}: переход не является допустимым прыжком")


def verify_path(path: List[int], moves: Optional[List[Move]] = None,
                start: int = ENGLISH_START, goal: int = ENGLISH_GOAL) -> bool:
    """
    Проверяет корректность пути.

    Правила:
    - путь начинается с start и заканчивается goal;
    - все колышки стоят на клетках доски;
    - каждый шаг — допустимый прыжок (минус один колышек, три клетки из таблицы ходов).
    """
    try:
        check_path(path, moves, start, goal)
    except ValidationError:
        return False
    return True


def path_to_jumps(path: List[int], moves: Optional[List[Move]] = None) -> List[Jump]:
    """
    Переводит последовательность досок в прыжки (from, jumped, to).

    Raises:
        ValidationError: соседние доски не связаны прыжком
    """
    if moves is None:
        moves = generate_moves()

    jumps: List[Jump] = []
    for step, (before, after) in enumerate(zip(path, path[1:]), 1):
        move = find_move(before, after, moves)
        if move is None:
            raise ValidationError(f"Шаг {step}: переход не является допустимым прыжком")
        # Перепрыгнутая клетка всегда средняя из трёх
        cells = sorted(pos for pos in range(move.all.bit_length()) if (move.all >> pos) & 1)
        jumped = cells[1]
        from_pos = _single_pos(move.vacated ^ (1 << jumped))
        jumps.append((from_pos, jumped, _single_pos(move.landing)))
    return jumps


def replay(start: int, masks: Iterable[int]) -> int:
    """Последовательно применяет XOR-маски к доске."""
    board = start
    for mask in masks:
        board ^= mask
    return board


def path_masks(path: List[int]) -> List[int]:
    """Маски изменений между соседними досками пути."""
    return [before ^ after for before, after in zip(path, path[1:])]
