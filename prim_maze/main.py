import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'prim_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Prim Maze: perfect maze generator with ASCII output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze and print it")
    gen_parser.add_argument("--width", type=int, default=10, help="Maze Width (cells)")
    gen_parser.add_argument("--depth", type=int, default=10, help="Maze Depth (cells)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--debug", action="store_true", help="Print the maze after every frontier draw")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation on a square maze")
    bench_parser.add_argument("--size", type=int, default=200, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("prim_maze")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    from prim_maze.maze import Maze
    from prim_maze.core.complexity import MazeStats

    if args.command == "generate":
        logger.info(f"Generating {args.width}x{args.depth} maze (seed={args.seed})...")
        try:
            maze = Maze(args.width, args.depth, debug=args.debug, seed=args.seed)
        except ValueError as e:
            parser.error(str(e))

        maze.display()

        if args.stats:
            stats = MazeStats.calculate_stats(maze.grid)
            logger.info(f"Stats: {stats}")

    elif args.command == "benchmark":
        logger.info(f"Running generation benchmark (Size: {args.size}x{args.size})...")
        t0 = time.time()
        try:
            maze = Maze(args.size, args.size, seed=args.seed)
        except ValueError as e:
            parser.error(str(e))
        duration = time.time() - t0

        cells = args.size * args.size
        gen = maze.generator
        print(f"\n{'CELLS':<10} | {'TIME (s)':<10} | {'DRAWS':<10} | {'STALE':<10}")
        print("-" * 50)
        print(f"{cells:<10} | {duration:<10.4f} | {gen.step_count:<10} | {gen.stale_count:<10}")
        logger.info(f"Perfect: {MazeStats.is_perfect(maze.grid)}")

if __name__ == "__main__":
    main()
