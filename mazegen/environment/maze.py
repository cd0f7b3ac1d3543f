import logging
import random
from typing import Iterator, List, Optional, Tuple

from mazegen import config as cfg
from .cell import Cell, CellType
from .errors import GenerationInvariantViolation, InvalidDimensions, InvalidSeed, MazeFormatError
from .stack import Stack

logger = logging.getLogger(__name__)

SEED_UPPER_BOUND = 2**64 - 1

# (d_row, d_col) у порядку: South, East, North, West
DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))

WALL_CHAR = "#"
PASSAGE_CHAR = "."


class GoalZone:
    """Прямокутна зона (включно з межами), яка завжди повністю відкрита."""

    def __init__(self, name: str, top: int, left: int, bottom: int, right: int):
        self.name = name
        self.top = top
        self.left = left
        self.bottom = bottom
        self.right = right

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Координати (x, y) усіх клітинок зони."""
        for y in range(self.top, self.bottom + 1):
            for x in range(self.left, self.right + 1):
                yield x, y

    def to_dict(self) -> dict:
        return {"top": self.top, "left": self.left, "bottom": self.bottom, "right": self.right}

    def __eq__(self, other):
        if not isinstance(other, GoalZone):
            return NotImplemented
        return (self.name, self.top, self.left, self.bottom, self.right) == \
               (other.name, other.top, other.left, other.bottom, other.right)

    def __repr__(self):
        return (f"GoalZone({self.name!r}, rows {self.top}-{self.bottom}, "
                f"cols {self.left}-{self.right})")


class GridMaze:
    """
    Досконалий (perfect) лабіринт на 2D сітці.

    Генерація - рандомізований пошук у глибину з явним стеком повернень.
    Після основного вирізання дві цільові зони 4x4 примусово стають проходами:
    "exit" у лівому нижньому куті та "start" у правому верхньому.

    Сітка індексується як grid[row][col]; публічні запити приймають (x=col, y=row).
    """
    def __init__(self, width: int, height: int, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None, _generate: bool = True):
        self._validate_dimensions(width, height)
        self._validate_seed(seed, rng)
        self.width = width
        self.height = height
        self.seed = seed
        self.carve_steps = 0
        self.backtracks = 0
        self.grid: List[List[Cell]] = [
            [Cell(x, y) for x in range(width)] for y in range(height)
        ]
        self.start_zone, self.exit_zone = self._build_goal_zones()
        if _generate:
            if rng is None:
                if self.seed is None:
                    self.seed = random.SystemRandom().randint(0, SEED_UPPER_BOUND)
                rng = random.Random(self.seed)
            self.generate(rng)

    @staticmethod
    def _validate_dimensions(width, height):
        minimum = cfg.MIN_MAZE_SIZE
        for value in (width, height):
            if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
                raise InvalidDimensions(width, height, minimum)

    @staticmethod
    def _validate_seed(seed, rng):
        if seed is None:
            return
        if rng is not None:
            raise InvalidSeed("Pass either seed or rng, not both: the grid would not match the seed.")
        if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed <= SEED_UPPER_BOUND:
            raise InvalidSeed(f"Seed must be an integer in [0, {SEED_UPPER_BOUND}], got {seed!r}.")

    def _build_goal_zones(self) -> Tuple[GoalZone, GoalZone]:
        size = cfg.GOAL_ZONE_SIZE
        start = GoalZone("start", 0, self.width - size, size - 1, self.width - 1)
        exit_ = GoalZone("exit", self.height - size, 0, self.height - 1, size - 1)
        return start, exit_

    @property
    def goal_zones(self) -> Tuple[GoalZone, GoalZone]:
        return self.start_zone, self.exit_zone

    # --- Генерація ---

    def generate(self, rng: random.Random):
        """Вирізає лабіринт у сітці, що складається лише зі стін."""
        visited = [[False] * self.width for _ in range(self.height)]
        # Зовнішня рамка не вирізається, тому одразу вважається відвіданою
        for col in range(self.width):
            visited[0][col] = True
            visited[self.height - 1][col] = True
        for row in range(self.height):
            visited[row][0] = True
            visited[row][self.width - 1] = True
        unvisited = (self.width - 2) * (self.height - 2)

        stack: Stack[Tuple[int, int]] = Stack()
        start_row, start_col = cfg.START_POS
        self.grid[start_row][start_col].carve()
        stack.push((start_row, start_col))
        unvisited -= self._mark_visited(visited, start_row, start_col)

        while unvisited > 0:
            current = stack.peek()
            if current is None:
                raise GenerationInvariantViolation(
                    f"Backtracking stack emptied with {unvisited} unvisited cells left "
                    f"in a {self.width}x{self.height} maze (seed={self.seed})."
                )
            row, col = current
            candidates = self._open_directions(visited, row, col)
            if candidates:
                d_row, d_col = rng.choice(candidates)
                next_row, next_col = row + 2 * d_row, col + 2 * d_col
                stack.push((next_row, next_col))
                unvisited -= self._mark_visited(visited, next_row, next_col)
                self.grid[row + d_row][col + d_col].carve()
                self.grid[next_row][next_col].carve()
                self.carve_steps += 1
            else:
                stack.pop()
                self.backtracks += 1

        self._carve_goal_zones()
        logger.debug("Generated %dx%d maze (seed=%s): %d carve steps, %d backtracks",
                     self.width, self.height, self.seed, self.carve_steps, self.backtracks)

    def _open_directions(self, visited, row: int, col: int) -> List[Tuple[int, int]]:
        """Напрямки, у яких клітинка через одну лежить усередині і ще не відвідана."""
        candidates = []
        for d_row, d_col in DIRECTIONS:
            if d_row == 1 and not row < self.height - 3:
                continue
            if d_col == 1 and not col < self.width - 3:
                continue
            if d_row == -1 and not row > 2:
                continue
            if d_col == -1 and not col > 2:
                continue
            if not visited[row + 2 * d_row][col + 2 * d_col]:
                candidates.append((d_row, d_col))
        return candidates

    def _mark_visited(self, visited, row: int, col: int) -> int:
        """
        Позначає центр і всіх 8 сусідів (у межах внутрішньої області) відвіданими.
        Саме цей радіус не дає вирізати паралельні коридори на відстані однієї клітинки.
        Повертає кількість клітинок, які стали відвіданими вперше.
        """
        rows = [row]
        if row > 1:
            rows.append(row - 1)
        if row < self.height - 2:
            rows.append(row + 1)
        cols = [col]
        if col > 1:
            cols.append(col - 1)
        if col < self.width - 2:
            cols.append(col + 1)

        newly_marked = 0
        for r in rows:
            for c in cols:
                if not visited[r][c]:
                    visited[r][c] = True
                    newly_marked += 1
        return newly_marked

    def _carve_goal_zones(self):
        for zone in self.goal_zones:
            for x, y in zone.cells():
                self.grid[y][x].carve()

    # --- Запити ---

    def _is_valid(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self._is_valid(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self.width}x{self.height} maze.")
        return self.grid[y][x]

    def cell_type(self, x: int, y: int) -> CellType:
        """Тип клітинки; все поза межами лабіринту вважається стіною."""
        if self._is_valid(x, y):
            return self.grid[y][x].cell_type
        return CellType.WALL

    def is_walkable(self, x: int, y: int) -> bool:
        return self.cell_type(x, y) is CellType.PASSAGE

    def in_goal_zone(self, x: int, y: int) -> bool:
        return any(zone.contains(x, y) for zone in self.goal_zones)

    def passage_cells(self) -> Iterator[Cell]:
        for row in self.grid:
            for cell in row:
                if cell.is_passage:
                    yield cell

    def passage_neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """Сусіди-проходи (x, y) по 4-зв'язності."""
        return [(x + d_col, y + d_row) for d_row, d_col in DIRECTIONS
                if self.is_walkable(x + d_col, y + d_row)]

    # --- Текстове представлення ---

    def to_rows(self, wall: str = WALL_CHAR, passage: str = PASSAGE_CHAR) -> List[str]:
        return ["".join(passage if cell.is_passage else wall for cell in row)
                for row in self.grid]

    def to_text(self) -> str:
        return "\n".join(self.to_rows(wall="##", passage="  "))

    def display(self):
        """Виводить лабіринт у консоль (для налагодження)."""
        print(self.to_text())

    @classmethod
    def from_rows(cls, rows: List[str], seed: Optional[int] = None) -> "GridMaze":
        """Відновлює лабіринт зі збережених рядків без повторної генерації."""
        if not rows:
            raise MazeFormatError("Maze grid is empty.")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise MazeFormatError("Maze grid rows have different lengths.")
        try:
            maze = cls(width, len(rows), seed=seed, _generate=False)
        except (InvalidDimensions, InvalidSeed) as e:
            raise MazeFormatError(f"Stored maze is invalid: {e}") from e

        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char == PASSAGE_CHAR:
                    maze.grid[y][x].carve()
                elif char != WALL_CHAR:
                    raise MazeFormatError(f"Unknown cell character {char!r} at ({x}, {y}).")
        return maze

    def __repr__(self):
        return f"GridMaze(width={self.width}, height={self.height}, seed={self.seed})"


def generate_maze(width: int, height: int, seed: Optional[int] = None,
                  rng: Optional[random.Random] = None) -> GridMaze:
    """Генерує новий лабіринт width x height. Однаковий сід дає однакову сітку."""
    return GridMaze(width, height, seed=seed, rng=rng)
