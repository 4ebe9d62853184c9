"""
solvers - Решатели Peg Solitaire

Экспортирует:
- ReverseSearch: перебор с возвратом от целевой доски к начальной
- solve_english: полный прогон для английской доски
"""

from .base import BaseSolver, SolverStats
from .reverse_dfs import ReverseSearch, SearchResult, solve_english

__all__ = [
    'BaseSolver',
    'SolverStats',
    'ReverseSearch',
    'SearchResult',
    'solve_english',
]
