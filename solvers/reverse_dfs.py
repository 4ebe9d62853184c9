"""
solvers/reverse_dfs.py

Перебор с возвратом в обратном направлении: от целевой доски к начальной.

Обратный ход добавляет два колышка и убирает один. Это тот же XOR по маске
move.all, что и прямой ход, отличается только проверка допустимости:
- (move.vacated & board) == 0: обе клетки, которые прямой ход освобождает, пусты;
- (move.landing & board) != 0: клетка приземления занята.

Для прямого направления такая проверка потребовала бы больше битовых
операций: проверить, что два бита равны нулю, можно одним AND, а что оба
установлены — нельзя.
"""

import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Set

from .base import BaseSolver, SolverStats
from core.bitboard import ENGLISH_START, ENGLISH_GOAL, VALID_MASK, peg_count
from core.moves import Move, Permutation, generate_moves, shuffle_moves
from utils.error_handling import InvalidBoardError, NoSolutionError, validate_board


class ReverseSearch(BaseSolver):
    """
    Сессия обратного поиска.

    Владеет множеством просмотренных досок и найденным путём, поэтому
    несколько сессий можно запускать независимо друг от друга.

    Ходы перебираются строго в порядке таблицы: перестановка, выбранная
    до поиска, определяет, какое из решений будет найдено и как быстро.
    """

    def __init__(self, moves: List[Move], start: int = ENGLISH_START,
                 goal: int = ENGLISH_GOAL, verbose: bool = False):
        """
        Args:
            moves: таблица ходов (уже перемешанная)
            start: начальная доска прямой задачи
            goal: целевая доска прямой задачи (отсюда начинается поиск)
            verbose: логировать ход поиска на уровне INFO
        """
        super().__init__(verbose=verbose)
        validate_board(start, VALID_MASK)
        validate_board(goal, VALID_MASK)
        if peg_count(start) <= peg_count(goal):
            raise InvalidBoardError("В начальной позиции должно быть больше колышков, чем в целевой")

        self.moves = tuple(moves)
        self.start = start
        self.goal = goal
        # Каждый обратный ход добавляет ровно один колышек
        self.max_depth = peg_count(start) - peg_count(goal)
        self.seen: Set[int] = set()
        self.solution: List[int] = []

    def reset(self) -> None:
        """Очищает состояние перед новым запуском."""
        self.seen = set()
        self.solution = [self.start]
        self.stats = SolverStats()

    def search(self, board: int, depth: int = 0) -> bool:
        """
        Рекурсивно ищет начальную доску, отменяя ходы.

        При успехе добавляет board в self.solution на пути вверх по стеку,
        поэтому путь собирается от начальной доски к целевой.
        """
        self.stats.nodes_visited += 1
        if depth > self.stats.max_depth:
            self.stats.max_depth = depth

        for move in self.moves:
            # Проверка пары первой: она чаще не проходит (~20% времени)
            if (move.vacated & board) == 0 and (move.landing & board) != 0:
                new_board = board ^ move.all
                if new_board in self.seen:
                    self.stats.nodes_pruned += 1
                    continue
                self.seen.add(new_board)
                if new_board == self.start or (
                        depth + 1 < self.max_depth and self.search(new_board, depth + 1)):
                    self.solution.append(board)
                    return True
        return False

    def search_iterative(self, board: int) -> bool:
        """
        То же, что search(), но с явным стеком вместо рекурсии.

        Порядок обхода и порядок добавления досок в путь совпадают с search().
        """
        moves = self.moves
        seen = self.seen
        stack = [[board, 0]]
        self.stats.nodes_visited += 1

        while stack:
            frame = stack[-1]
            current, index = frame
            pushed = False

            while index < len(moves):
                move = moves[index]
                index += 1
                if (move.vacated & current) == 0 and (move.landing & current) != 0:
                    new_board = current ^ move.all
                    if new_board in seen:
                        self.stats.nodes_pruned += 1
                        continue
                    seen.add(new_board)
                    if new_board == self.start:
                        # Самая глубокая доска первой, целевая последней
                        for visited_board, _ in reversed(stack):
                            self.solution.append(visited_board)
                        return True
                    if len(stack) < self.max_depth:
                        frame[1] = index
                        stack.append([new_board, 0])
                        self.stats.nodes_visited += 1
                        if len(stack) - 1 > self.stats.max_depth:
                            self.stats.max_depth = len(stack) - 1
                        pushed = True
                        break

            if not pushed:
                stack.pop()

        return False

    def solve(self, iterative: bool = False) -> Optional[List[int]]:
        """
        Запускает поиск от целевой доски.

        Args:
            iterative: использовать явный стек вместо рекурсии

        Returns:
            Доски от начальной до целевой включительно или None
        """
        self.reset()
        self._log(f"Starting reverse search (moves={len(self.moves)}, "
                  f"pegs {peg_count(self.goal)} -> {peg_count(self.start)})")

        started = time.perf_counter()
        if iterative:
            found = self.search_iterative(self.goal)
        else:
            found = self.search(self.goal)
        self.stats.time_elapsed = time.perf_counter() - started

        if not found:
            self.logger.warning(f"No solution found ({self.stats})")
            return None

        self.stats.solution_length = len(self.solution) - 1
        self._log(f"Solution found: {self.stats.solution_length} moves")
        self._log(f"Stats: {self.stats}")
        return list(self.solution)


@dataclass
class SearchResult:
    """Результат полного прогона: порядок ходов, путь и статистика."""
    moves: List[Move]
    path: Optional[List[int]]
    stats: SolverStats = field(default_factory=SolverStats)

    @property
    def found(self) -> bool:
        return self.path is not None

    def require_path(self) -> List[int]:
        """Путь или NoSolutionError, если поиск исчерпан."""
        if self.path is None:
            raise NoSolutionError("Перебор завершён, решение не найдено")
        return self.path


def solve_english(permute: Optional[Permutation] = None, rng: Optional[random.Random] = None,
                  iterative: bool = False, verbose: bool = False) -> SearchResult:
    """
    Полный прогон для английской доски: генерация, перемешивание, поиск.

    Args:
        permute: своя перестановка таблицы ходов
        rng: источник случайности для перемешивания
        iterative: поиск с явным стеком
        verbose: подробный лог

    Returns:
        SearchResult
    """
    moves = shuffle_moves(generate_moves(), permute=permute, rng=rng)
    session = ReverseSearch(moves, verbose=verbose)
    path = session.solve(iterative=iterative)
    return SearchResult(moves=moves, path=path, stats=session.stats)
