from .cell import Cell, CellType
from .errors import GenerationInvariantViolation, InvalidDimensions, InvalidSeed, MazeError, MazeFormatError
from .maze import GoalZone, GridMaze, generate_maze
from .stack import Stack
