"""
solutions - Проверка найденных решений.
"""

from .verify import (
    find_move, check_path, verify_path, path_to_jumps, replay, path_masks
)

__all__ = [
    'find_move',
    'check_path',
    'verify_path',
    'path_to_jumps',
    'replay',
    'path_masks',
]
