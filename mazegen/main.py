import argparse
import importlib
import logging
import sys
from typing import List, Optional

from mazegen import config as cfg
from mazegen.analysis.maze_analyzer import MazeDataAnalyzer
from mazegen.environment.errors import MazeError
from mazegen.environment.maze import generate_maze
from mazegen.serialization.json_serializer import MazeJSONSerializer


def load_config() -> dict:
    """Завантажує конфігурацію з config.py."""
    importlib.reload(cfg)
    config_dict = {key: getattr(cfg, key) for key in dir(cfg) if key.isupper()}

    config_dict.setdefault('MAZE_WIDTH', 15)
    config_dict.setdefault('MAZE_HEIGHT', 15)
    config_dict.setdefault('MAZE_SEED', None)
    config_dict.setdefault('STATS_SAMPLE_SIZE', 50)
    config_dict.setdefault('LOG_LEVEL', "INFO")
    return config_dict


def build_parser(config: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mazegen",
        description="Generate a random perfect maze with start and exit zones."
    )
    parser.add_argument("--width", type=int, default=config['MAZE_WIDTH'],
                        help="maze width in cells (default: %(default)s)")
    parser.add_argument("--height", type=int, default=config['MAZE_HEIGHT'],
                        help="maze height in cells (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=config['MAZE_SEED'],
                        help="random seed; a fresh one is drawn when omitted")
    parser.add_argument("--save", metavar="PATH", help="save the generated maze as JSON")
    parser.add_argument("--load", metavar="PATH", help="load a maze from JSON instead of generating")
    parser.add_argument("--stats", type=int, metavar="N",
                        help="generate N mazes of the given size and print statistics")
    parser.add_argument("--csv", metavar="DIR", help="with --stats, export the statistics to DIR")
    parser.add_argument("--plot", metavar="PATH", help="with --stats, save a dead end histogram to PATH")
    parser.add_argument("--quiet", action="store_true", help="do not print the maze")
    return parser


def run_statistics(args, config: dict):
    sample_size = args.stats if args.stats > 0 else config['STATS_SAMPLE_SIZE']
    first_seed = args.seed if args.seed is not None else 0
    analyzer = MazeDataAnalyzer(args.width, args.height, range(first_seed, first_seed + sample_size))

    summary = analyzer.get_summary()
    print(f"Statistics for {summary['sample_size']} mazes of size {args.width}x{args.height}:")
    print(f"  Dead ends (mean):     {summary['mean_dead_ends']:.2f}")
    print(f"  Junctions (mean):     {summary['mean_junctions']:.2f}")
    print(f"  Passage ratio (mean): {summary['mean_passage_ratio']:.3f}")
    print(f"  Carve steps (max):    {summary['max_carve_steps']}")

    if args.csv:
        print(f"Data exported to {analyzer.export_to_csv(args.csv)}")
    if args.plot:
        analyzer.plot_dead_end_distribution(save_path=args.plot, show=False)
        print(f"Plot saved to {args.plot}")


def main(argv: Optional[List[str]] = None) -> int:
    config = load_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)
    if args.stats is None and (args.csv or args.plot):
        parser.error("--csv and --plot require --stats")
    logging.basicConfig(level=config['LOG_LEVEL'], format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.stats is not None:
            run_statistics(args, config)
            return 0

        if args.load:
            maze = MazeJSONSerializer.load_maze(args.load)
            print(f"Loaded {maze.width}x{maze.height} maze from {args.load} (seed: {maze.seed})")
        else:
            maze = generate_maze(args.width, args.height, seed=args.seed)
            print(f"Generated {maze.width}x{maze.height} maze with seed: {maze.seed}")

        if not args.quiet:
            maze.display()

        if args.save:
            MazeJSONSerializer.save_maze(args.save, maze)
            print(f"Maze saved to {args.save}")
    except (MazeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
