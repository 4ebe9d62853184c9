"""
peg_io - Вывод для Peg Solitaire

Экспортирует:
- Отрисовку досок и пути решения
- Форматирование списка прыжков
"""

from .visualizer import (
    render_line, render_board, render_path, render_move, format_jumps
)

__all__ = [
    'render_line',
    'render_board',
    'render_path',
    'render_move',
    'format_jumps',
]
