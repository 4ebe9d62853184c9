"""
utils/error_handling.py

Исключения решателя и проверка досок.
"""


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной доски."""
    pass


class NoSolutionError(SolverError):
    """Ошибка отсутствия решения."""
    pass


class ValidationError(SolverError):
    """Ошибка валидации решения."""
    pass


class GeometryError(SolverError):
    """Таблица ходов не соответствует форме доски."""
    pass


def validate_board(board, valid_mask: int) -> bool:
    """
    Валидирует доску.

    Args:
        board: доска для валидации (int)
        valid_mask: маска допустимых клеток

    Returns:
        True если доска валидна

    Raises:
        InvalidBoardError: если доска невалидна
    """
    if board is None:
        raise InvalidBoardError("Доска не может быть None")

    if isinstance(board, bool) or not isinstance(board, int):
        raise InvalidBoardError(f"Доска должна быть int, получено {type(board).__name__}")

    if board <= 0:
        raise InvalidBoardError("Доска должна содержать хотя бы один колышек")

    if board & ~valid_mask:
        raise InvalidBoardError("Колышки вне допустимых клеток доски")

    return True
