from enum import Enum


class CellType(Enum):
    WALL = "wall"
    PASSAGE = "passage"


class Cell:
    """
    Одна позиція сітки лабіринту.

    Рівність та хеш визначаються ЛИШЕ координатами (x - стовпець, y - рядок),
    тип клітинки на них не впливає. На це покладаються шари, що перевіряють,
    чи шлях вже проходив через певну координату.
    """
    __slots__ = ("x", "y", "cell_type")

    def __init__(self, x: int, y: int, cell_type: CellType = CellType.WALL):
        self.x = x
        self.y = y
        self.cell_type = cell_type

    @property
    def is_wall(self) -> bool:
        return self.cell_type is CellType.WALL

    @property
    def is_passage(self) -> bool:
        return self.cell_type is CellType.PASSAGE

    def carve(self):
        """Перетворює стіну на прохід."""
        self.cell_type = CellType.PASSAGE

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Cell(x={self.x}, y={self.y}, {self.cell_type.name})"
