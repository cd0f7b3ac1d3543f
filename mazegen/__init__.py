"""Генерація досконалих лабіринтів на сітці для гри "проведи шлях від старту до виходу"."""

from .environment import (
    Cell,
    CellType,
    GenerationInvariantViolation,
    GoalZone,
    GridMaze,
    InvalidDimensions,
    InvalidSeed,
    MazeError,
    MazeFormatError,
    Stack,
    generate_maze,
)

__version__ = "1.0.0"
