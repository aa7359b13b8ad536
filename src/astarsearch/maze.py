from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
import math
from typing import NamedTuple

from .core.types import HeuristicFn

SPACE = " "
WALL = "*"
START = "S"
FINISH = "F"
STEP = "·"
PATH = "•"

STEP_COLOR = "\x1b[38;5;61m"
PATH_COLOR = "\x1b[38;5;128m"
RESET = "\x1b[0m"


class Location(NamedTuple):
    i: int
    j: int


def manhattan_estimate(finish: Location, multiplier: float = 1.0) -> HeuristicFn[Location]:
    def h(p: Location) -> float:
        return abs(p.i - finish.i) + abs(p.j - finish.j) * multiplier

    return h


def euclid_estimate(finish: Location, multiplier: float = 1.0) -> HeuristicFn[Location]:
    def h(p: Location) -> float:
        return math.sqrt((p.i - finish.i) ** 2 + (p.j - finish.j) ** 2 * multiplier)

    return h


HEURISTICS = {"manhattan": manhattan_estimate, "euclid": euclid_estimate}


@dataclass
class MazeConfig:
    """Cost and estimate settings; the multipliers scale the column term and each step."""

    heuristic: str = "manhattan"
    estimate_multiplier: float = 1.5
    cost_multiplier: float = 1.0

    def __post_init__(self) -> None:
        if self.heuristic not in HEURISTICS:
            raise ValueError(
                f"unknown heuristic {self.heuristic!r}; choose from {sorted(HEURISTICS)}"
            )

    def estimate_fn(self, finish: Location) -> HeuristicFn[Location]:
        return HEURISTICS[self.heuristic](finish, self.estimate_multiplier)


class Maze:
    """Text maze: ``*`` walls, spaces, ``S`` start, ``F`` finish. Rows may differ in length."""

    def __init__(
        self,
        cells: Sequence[Sequence[str]],
        start: Location,
        finish: Location,
        config: MazeConfig | None = None,
    ) -> None:
        self.cells = [list(row) for row in cells]
        self._start = start
        self.finish = finish
        self.config = config or MazeConfig()
        self._h = self.config.estimate_fn(finish)
        self.curr = start

    @classmethod
    def from_lines(cls, lines: Iterable[str], config: MazeConfig | None = None) -> Maze:
        cells: list[list[str]] = []
        start: Location | None = None
        finish: Location | None = None
        for i, line in enumerate(lines):
            row = list(line.rstrip("\r\n"))
            for j, ch in enumerate(row):
                if ch == START:
                    start = Location(i, j)
                elif ch == FINISH:
                    finish = Location(i, j)
            cells.append(row)
        if start is None:
            raise ValueError(f"maze has no start cell {START!r}")
        if finish is None:
            raise ValueError(f"maze has no finish cell {FINISH!r}")
        return cls(cells, start, finish, config)

    @classmethod
    def from_file(cls, path: str, config: MazeConfig | None = None) -> Maze:
        with open(path, encoding="utf-8") as f:
            return cls.from_lines(f.read().splitlines(), config)

    def start(self) -> Location:
        return self._start

    def is_goal(self) -> bool:
        return self.curr == self.finish

    def move_to(self, state: Location) -> None:
        self.curr = state

    def cost(self, _state: Location) -> float:
        return self.config.cost_multiplier

    def estimate(self, state: Location) -> float:
        return self._h(state)

    def _open(self, i: int, j: int) -> bool:
        if i < 0 or j < 0 or i >= len(self.cells) or j >= len(self.cells[i]):
            return False
        return self.cells[i][j] in (SPACE, FINISH)

    def successors(self) -> list[Location]:
        i, j = self.curr
        # north, south, west, east
        candidates = [(i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1)]
        return [Location(a, b) for a, b in candidates if self._open(a, b)]

    def lines(self) -> list[str]:
        return ["".join(row) for row in self.cells]

    def draw(self, path: Iterable[Location], explored: Iterable[Location]) -> list[list[str]]:
        """Overlay explored cells, then the path, onto the open cells of a copy of the maze."""
        marks: dict[Location, str] = {}
        for s in explored:
            marks[s] = STEP
        for s in path:
            marks[s] = PATH
        out: list[list[str]] = []
        for i, row in enumerate(self.cells):
            out.append(
                [
                    marks[Location(i, j)] if ch == SPACE and Location(i, j) in marks else ch
                    for j, ch in enumerate(row)
                ]
            )
        return out


def legend() -> str:
    return f"{WALL} - wall  {START} - start  {STEP * 3} - explored  {PATH * 3} - shortest path"


def colorize(text: str) -> str:
    out = []
    for ch in text:
        if ch in (START, FINISH, PATH):
            out.append(PATH_COLOR + ch + RESET)
        elif ch == STEP:
            out.append(STEP_COLOR + ch + RESET)
        else:
            out.append(ch)
    return "".join(out)


def render(title: str, grid: Sequence[Sequence[str]], color: bool = False) -> str:
    rows = ["".join(row) for row in grid]
    if not color:
        return "\n".join([title, "", *rows, legend(), ""])
    body = [f"  {colorize(r)}" for r in rows]
    return "\n".join(
        [
            "",
            f" {title}",
            *body,
            f" {colorize(legend())}",
            ' Run with "--help" for available options.',
            "",
        ]
    )


DEMOS: list[tuple[str, list[str]]] = [
    (
        "Straight corridor",
        [
            "**********************",
            "*S                  F*",
            "**********************",
        ],
    ),
    (
        "A wall with a gap",
        [
            "***************",
            "*S     *      *",
            "*      *      *",
            "*      *      *",
            "*             *",
            "*      *     F*",
            "***************",
        ],
    ),
    (
        "Heuristic trap",
        [
            "*****************",
            "*       F       *",
            "*               *",
            "*   *********   *",
            "*   *       *   *",
            "*   *   S   *   *",
            "*   *       *   *",
            "*   **** ****   *",
            "*               *",
            "*****************",
        ],
    ),
]
