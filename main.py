#!/usr/bin/env python3
"""
main.py

Точка входа для решателя английского Peg Solitaire.

Использование:
    python main.py                  # случайный порядок ходов
    python main.py --seed 7         # воспроизводимый запуск
    python main.py --moves          # ещё и список прыжков
    python main.py --check          # проверить таблицу ходов
"""

import sys
import argparse
import logging
import random

from core.bitboard import ENGLISH_START
from core.moves import generate_moves, validate_moves
from peg_io.visualizer import (
    DEFAULT_PER_ROW, render_board, render_path, render_move, format_jumps
)
from solutions.verify import check_path, path_to_jumps
from solvers.reverse_dfs import solve_english
from utils.error_handling import SolverError
from utils.logging import get_logger, setup_file_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Peg Solitaire Solver (английская доска, обратный перебор)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                     # случайное решение
  python main.py --seed 42           # фиксированная перестановка ходов
  python main.py --per-row 8         # по 8 досок в ряд
  python main.py --show-moves        # таблица ходов
        """
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Зерно для перемешивания ходов (по умолчанию случайное)'
    )
    parser.add_argument(
        '--no-shuffle', action='store_true',
        help='Не перемешивать ходы (порядок генерации)'
    )
    parser.add_argument(
        '--iterative', action='store_true',
        help='Поиск с явным стеком вместо рекурсии'
    )
    parser.add_argument(
        '--per-row', type=int, default=DEFAULT_PER_ROW,
        help=f'Досок в одном ряду вывода (default: {DEFAULT_PER_ROW})'
    )
    parser.add_argument(
        '--no-color', action='store_true',
        help='Без ANSI-цветов'
    )
    parser.add_argument(
        '--moves', action='store_true',
        help='Вывести нумерованный список прыжков'
    )
    parser.add_argument(
        '--show-moves', action='store_true',
        help='Показать таблицу ходов и выйти'
    )
    parser.add_argument(
        '--check', action='store_true',
        help='Проверить геометрию таблицы ходов и выйти'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог (DEBUG)'
    )
    parser.add_argument(
        '--log-file', default=None,
        help='Дублировать лог в файл'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logger = get_logger()
    logger.set_level(level)
    if args.log_file:
        setup_file_logging(args.log_file, level)

    color = not args.no_color

    if args.check or args.show_moves:
        moves = generate_moves()
        try:
            validate_moves(moves)
        except SolverError as e:
            logger.error(f"Таблица ходов некорректна: {e}")
            return 1
        if args.show_moves:
            for move in moves:
                print(render_move(move, color=color))
        print(f"✅ Таблица ходов корректна ({len(moves)} ходов)")
        return 0

    if args.per_row < 1:
        logger.error("--per-row должен быть >= 1")
        return 1

    print("Начальная позиция:")
    print(render_board(ENGLISH_START, color=color))

    if args.no_shuffle:
        result = solve_english(permute=lambda moves: moves, iterative=args.iterative,
                               verbose=args.verbose)
    else:
        rng = random.Random(args.seed) if args.seed is not None else None
        result = solve_english(rng=rng, iterative=args.iterative, verbose=args.verbose)

    try:
        path = result.require_path()
        check_path(path, result.moves)
    except SolverError as e:
        print(f"\n❌ {e}")
        print(f"📊 Статистика: {result.stats}")
        return 1

    print(render_path(path, per_row=args.per_row, color=color))
    if args.moves:
        print(format_jumps(path_to_jumps(path, result.moves)))
    print(f"\n⏱ Время: {result.stats.time_elapsed:.3f}с")
    print(f"📊 Статистика: {result.stats}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
