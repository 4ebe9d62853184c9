"""
tests/conftest.py

Общие фикстуры.
"""

import logging
import os
import sys

import pytest

# Добавляем корень проекта в путь
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.moves import generate_moves  # noqa: E402


def _board(*positions):
    return sum(1 << pos for pos in positions)


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: полный перебор английской доски")


@pytest.fixture
def moves():
    """Таблица ходов в порядке генерации."""
    return generate_moves()


@pytest.fixture
def small_path():
    """
    Шесть колышков, сводимых к одному в центре:
    D6→D4, A3→C3, D4→B4, C2→C4, B4→D4.
    """
    return [
        _board(9, 14, 15, 23, 31, 38),
        _board(9, 14, 15, 23, 24),
        _board(9, 16, 23, 24),
        _board(9, 16, 22),
        _board(22, 23),
        _board(24),
    ]


@pytest.fixture
def small_start(small_path):
    return small_path[0]


@pytest.fixture(autouse=True)
def _console_log_to_current_stdout():
    """Консольный handler пишет в текущий sys.stdout (его подменяет capsys)."""
    from utils.logging import get_logger

    for handler in get_logger().logger.handlers:
        if type(handler) is logging.StreamHandler:
            handler.setStream(sys.stdout)
    yield
