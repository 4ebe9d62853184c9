"""
utils - Логирование и обработка ошибок.
"""

from .logging import get_logger, setup_file_logging
from .error_handling import (
    SolverError, InvalidBoardError, NoSolutionError,
    ValidationError, GeometryError, validate_board
)

__all__ = [
    'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidBoardError', 'NoSolutionError',
    'ValidationError', 'GeometryError', 'validate_board',
]
