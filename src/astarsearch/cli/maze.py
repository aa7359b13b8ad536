import argparse
import logging
import random
import re
import sys

from astarsearch.astar import AStar, Outcome, SearchParams
from astarsearch.kruskal import random_maze
from astarsearch.logging import get_logger
from astarsearch.maze import DEMOS, Maze, MazeConfig, render

DEFAULT_SIZE = "3x18"
SIZE_RE = re.compile(r"\s*([+-]?\d+)x([+-]?\d+)")

EXAMPLES = """examples:
  astarsearch-maze --size 2x40                      long random maze
  astarsearch-maze --demo 2 --euclid --estimate 0.5 euclid distance with custom estimate
  astarsearch-maze --random --cost 0                random maze with greedy traversal"""


def parse_size(s: str) -> tuple[int, int]:
    """Read a leading ``NxM``; anything after it is ignored, so ``3x18x2`` is 3 by 18."""
    m = SIZE_RE.match(s.lower())
    if m is None or int(m.group(1)) <= 0 or int(m.group(2)) <= 0:
        raise ValueError(f"size must be positive and look like NxM, got {s!r}")
    return int(m.group(1)), int(m.group(2))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="astarsearch-maze",
        description="Demonstrate A* search traversing a maze. "
        "With no FILE, show a demo or a random maze.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("file", nargs="?", help="read the maze from FILE")
    p.add_argument("--demo", type=int, default=0, help=f"show demo #1..#{len(DEMOS)}")
    p.add_argument("--random", action="store_true", help="show a random maze")
    p.add_argument(
        "--size", type=str, default=DEFAULT_SIZE, help="random maze of size NxM; trailing text is ignored"
    )
    p.add_argument("--seed", type=int, default=None, help="seed for demo choice and maze")
    h = p.add_mutually_exclusive_group()
    h.add_argument("--manhattan", action="store_true", help="Manhattan distance estimate (default)")
    h.add_argument("--euclid", action="store_true", help="Euclidean distance estimate")
    p.add_argument("--estimate", type=float, default=1.5, help="estimate multiplier")
    p.add_argument("--cost", type=float, default=1.0, help="cost multiplier")
    p.add_argument("--color", choices=["auto", "always", "never"], default="auto")
    p.add_argument("--log_every", type=int, default=None, help="log progress every N expansions")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = get_logger("astarsearch.cli", level=logging.INFO, stream="stderr")
    rng = random.Random(args.seed)
    config = MazeConfig(
        heuristic="euclid" if args.euclid else "manhattan",
        estimate_multiplier=args.estimate,
        cost_multiplier=args.cost,
    )

    show_random = args.random
    if args.demo == 0:
        demo = rng.randrange(len(DEMOS))
        # pick between a demo and a generated maze
        if rng.randrange(2) == 0:
            show_random = True
    else:
        demo = args.demo - 1
        if not 0 <= demo < len(DEMOS):
            print(f"Available demos are from #1 upto #{len(DEMOS)}.", file=sys.stderr)
            return 1

    try:
        if args.file:
            maze = Maze.from_file(args.file, config)
            title = "Charming maze"
        elif show_random or args.size != DEFAULT_SIZE:
            rows, cols = parse_size(args.size)
            maze = random_maze(rows, cols, seed=rng.randrange(2**32), config=config)
            title = "Randomly generated maze"
        else:
            name, lines = DEMOS[demo]
            maze = Maze.from_lines(lines, config)
            title = f"Demo #{demo + 1}. {name}"
    except OSError as exc:
        print(f"Cannot read a maze from {args.file!r}: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    engine = AStar(maze, params=SearchParams(log_every=args.log_every), logger=logger)
    path, explored, outcome = engine.run()
    if outcome is not Outcome.FOUND:
        title = "Yikes! Could not find the path for this one"
    logger.debug(
        "outcome=%s explored=%d path=%d", outcome.value, len(explored), len(path)
    )

    color = args.color == "always" or (args.color == "auto" and sys.stdout.isatty())
    sys.stdout.write(render(title, maze.draw(path, explored), color=color))
    return 0


if __name__ == "__main__":
    sys.exit(main())
