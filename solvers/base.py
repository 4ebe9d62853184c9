"""
solvers/base.py

Базовый класс для решателей.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from dataclasses import dataclass

from utils.logging import get_logger


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Все решатели наследуют от него и реализуют метод solve().
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.logger = get_logger()

    @abstractmethod
    def solve(self) -> Optional[List[int]]:
        """
        Решает головоломку.

        Returns:
            Последовательность досок от начальной до целевой или None
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет в лог: INFO при verbose=True, иначе DEBUG."""
        message = f"[{self.__class__.__name__}] {message}"
        if self.verbose:
            self.logger.info(message)
        else:
            self.logger.debug(message)
