import argparse
import sys

from astarsearch.astar import Outcome, search
from astarsearch.scenarios import PouringPuzzle, format_pouring


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="astarsearch-puzzle",
        description="Measure out water with two glasses using A* search",
    )
    p.add_argument("--first", type=int, default=9, help="capacity of the first glass")
    p.add_argument("--second", type=int, default=4, help="capacity of the second glass")
    p.add_argument("--goal", type=int, default=6, help="amount to measure")
    args = p.parse_args(argv)
    if args.first < 0 or args.second < 0 or args.goal < 0:
        print("capacities and goal must not be negative", file=sys.stderr)
        return 1

    puzzle = PouringPuzzle(cap_first=args.first, cap_second=args.second, goal=args.goal)
    path, explored, outcome = search(puzzle)
    if outcome is not Outcome.FOUND:
        print(
            f"Cannot measure {args.goal} with glasses of {args.first} and {args.second} "
            f"({len(explored)} states explored).",
            file=sys.stderr,
        )
        return 1
    print(format_pouring(path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
