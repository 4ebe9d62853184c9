"""
setup.py

Установка решателя.

Использование:
    pip install -e .[test]
    pytest
"""

from setuptools import setup, find_packages

setup(
    name="peg_solitaire_reverse",
    version="1.0.0",
    description="English Peg Solitaire solver: reverse backtracking over a bitboard",
    packages=find_packages(include=["core", "solvers", "solutions", "peg_io", "utils"]),
    py_modules=["main"],
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "peg-solitaire=main:main",
        ],
    },
    zip_safe=False,
)
