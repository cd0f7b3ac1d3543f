import json
import logging
from datetime import datetime

from mazegen.environment.errors import MazeFormatError
from mazegen.environment.maze import GridMaze

logger = logging.getLogger(__name__)


class MazeJSONSerializer:
    """Клас для серіалізації та десеріалізації лабіринтів у JSON формат."""

    VERSION = "1.0"

    @staticmethod
    def serialize_maze(maze: GridMaze) -> dict:
        """Серіалізує GridMaze в словник."""
        return {
            "version": MazeJSONSerializer.VERSION,
            "metadata": {
                "save_date": datetime.now().isoformat(),
                "seed": maze.seed,
                "width": maze.width,
                "height": maze.height,
                "carve_steps": maze.carve_steps,
                "backtracks": maze.backtracks
            },
            "goal_zones": {zone.name: zone.to_dict() for zone in maze.goal_zones},
            "grid": maze.to_rows()
        }

    @staticmethod
    def deserialize_maze(data: dict) -> GridMaze:
        """Десеріалізує GridMaze зі словника."""
        if data.get("version") != MazeJSONSerializer.VERSION:
            logger.warning("JSON version mismatch. File: %s, Expected: %s",
                           data.get("version"), MazeJSONSerializer.VERSION)

        rows = data.get("grid")
        if not isinstance(rows, list) or not all(isinstance(row, str) for row in rows):
            raise MazeFormatError("Maze data has no 'grid' list of row strings.")

        metadata = data.get("metadata", {})
        if not isinstance(metadata, dict):
            raise MazeFormatError("Maze 'metadata' must be a JSON object.")
        maze = GridMaze.from_rows(rows, seed=metadata.get("seed"))

        # Розміри в метаданих мають збігатися з фактичною сіткою
        width = metadata.get("width", maze.width)
        height = metadata.get("height", maze.height)
        if (width, height) != (maze.width, maze.height):
            raise MazeFormatError(
                f"Metadata size {width}x{height} does not match grid size {maze.width}x{maze.height}."
            )
        maze.carve_steps = metadata.get("carve_steps", 0)
        maze.backtracks = metadata.get("backtracks", 0)
        return maze

    @staticmethod
    def save_maze(filepath: str, maze: GridMaze):
        """Зберігає лабіринт у JSON файл."""
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(MazeJSONSerializer.serialize_maze(maze), f, indent=2, ensure_ascii=False)
        logger.info("Maze %dx%d (seed=%s) saved to %s", maze.width, maze.height, maze.seed, filepath)

    @staticmethod
    def load_maze(filepath: str) -> GridMaze:
        """Завантажує лабіринт з JSON файлу."""
        with open(filepath, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise MazeFormatError(f"Invalid JSON in {filepath}: {e}") from e
        if not isinstance(data, dict):
            raise MazeFormatError(f"Expected a JSON object in {filepath}.")
        return MazeJSONSerializer.deserialize_maze(data)
