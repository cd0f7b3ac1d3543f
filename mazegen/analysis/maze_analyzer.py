import logging
import os
from typing import Dict, Iterable, List, Optional, Tuple

import matplotlib.pyplot as plt
import pandas as pd

from mazegen import config as cfg
from mazegen.environment.maze import GridMaze

logger = logging.getLogger(__name__)

STATISTICS_COLUMNS = [
    "seed", "width", "height", "passage_cells", "passage_ratio",
    "dead_ends", "junctions", "carve_steps", "backtracks"
]


def maze_metrics(maze: GridMaze) -> Dict:
    """Структурні метрики одного лабіринту (цільові зони не враховуються)."""
    passage_cells = 0
    dead_ends = 0
    junctions = 0
    for cell in maze.passage_cells():
        if maze.in_goal_zone(cell.x, cell.y):
            continue
        passage_cells += 1
        degree = len(maze.passage_neighbors(cell.x, cell.y))
        if degree == 1:
            dead_ends += 1
        elif degree >= 3:
            junctions += 1

    return {
        "seed": maze.seed,
        "width": maze.width,
        "height": maze.height,
        "passage_cells": passage_cells,
        "passage_ratio": passage_cells / float(maze.width * maze.height),
        "dead_ends": dead_ends,
        "junctions": junctions,
        "carve_steps": maze.carve_steps,
        "backtracks": maze.backtracks
    }


class MazeDataAnalyzer:
    """Клас для аналізу та візуалізації статистики згенерованих лабіринтів."""

    def __init__(self, width: int = cfg.MAZE_WIDTH, height: int = cfg.MAZE_HEIGHT,
                 seeds: Optional[Iterable[int]] = None):
        self.width = width
        self.height = height
        self.seeds = list(seeds) if seeds is not None else list(range(cfg.STATS_SAMPLE_SIZE))
        self._statistics: Optional[pd.DataFrame] = None

    def get_maze_statistics(self) -> pd.DataFrame:
        """Повертає метрики для кожного сіду як DataFrame (обчислюється один раз)."""
        if self._statistics is None:
            logger.info("Generating %d mazes of size %dx%d for statistics",
                        len(self.seeds), self.width, self.height)
            rows = [maze_metrics(GridMaze(self.width, self.height, seed=seed)) for seed in self.seeds]
            self._statistics = pd.DataFrame(rows, columns=STATISTICS_COLUMNS)
        return self._statistics

    def get_summary(self) -> Dict:
        """Повертає базову зведену інформацію по вибірці."""
        df = self.get_maze_statistics()
        return {
            "width": self.width,
            "height": self.height,
            "sample_size": len(df),
            "mean_dead_ends": float(df["dead_ends"].mean()),
            "mean_junctions": float(df["junctions"].mean()),
            "mean_passage_ratio": float(df["passage_ratio"].mean()),
            "max_carve_steps": int(df["carve_steps"].max())
        }

    def plot_dead_end_distribution(self, save_path: Optional[str] = None, show: bool = True):
        """Малює гістограму кількості тупиків."""
        df = self.get_maze_statistics()

        plt.figure(figsize=(12, 6))
        plt.hist(df['dead_ends'], bins=20, alpha=0.7, color='green', edgecolor='black')

        plt.xlabel('Dead Ends per Maze')
        plt.ylabel('Number of Mazes')
        plt.title(f'Dead End Distribution ({self.width}x{self.height}, {len(df)} mazes)')
        plt.grid(True, alpha=0.3)

        self._finish_plot(save_path, show)

    def plot_passage_ratio(self, save_path: Optional[str] = None, show: bool = True):
        """Малює частку проходів та кількість розгалужень для кожного сіду."""
        df = self.get_maze_statistics()

        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(15, 6))

        ax1.scatter(df['seed'], df['passage_ratio'], alpha=0.5)
        ax1.set_xlabel('Seed')
        ax1.set_ylabel('Passage Ratio')
        ax1.set_title('Passage Ratio per Seed')
        ax1.grid(True, alpha=0.3)

        ax2.scatter(df['junctions'], df['dead_ends'], alpha=0.5, color='orange')
        ax2.set_xlabel('Junctions')
        ax2.set_ylabel('Dead Ends')
        ax2.set_title('Junctions vs Dead Ends')
        ax2.grid(True, alpha=0.3)

        plt.tight_layout()
        self._finish_plot(save_path, show)

    @staticmethod
    def _finish_plot(save_path: Optional[str], show: bool):
        if save_path:
            plt.savefig(save_path, dpi=cfg.STATS_PLOT_DPI, bbox_inches='tight')
        if show:
            plt.show()
        else:
            plt.close()

    @staticmethod
    def compare_sizes(sizes: List[Tuple[int, int]], seeds: Iterable[int]) -> pd.DataFrame:
        """Порівнює середні метрики для кількох розмірів лабіринту."""
        seeds = list(seeds)
        summaries = [MazeDataAnalyzer(width, height, seeds).get_summary() for width, height in sizes]
        return pd.DataFrame(summaries)

    def export_to_csv(self, output_dir: str) -> str:
        """Експортує метрики у CSV файл для подальшого аналізу."""
        os.makedirs(output_dir, exist_ok=True)

        filepath = os.path.join(output_dir, f"maze_statistics_{self.width}x{self.height}.csv")
        self.get_maze_statistics().to_csv(filepath, index=False)

        logger.info("Data exported to %s", filepath)
        return filepath
