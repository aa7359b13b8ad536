from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Generic

from .core.types import HeuristicFn, S as State


def constant_estimate(value: float = 1.0) -> HeuristicFn[Hashable]:
    def h(_state: Hashable) -> float:
        return value

    return h


class GraphPolicy(Generic[State]):
    """Weighted directed graph given as ``{state: {successor: cost}}``."""

    def __init__(
        self,
        edges: Mapping[State, Mapping[State, float]],
        start: State,
        finish: State,
        estimate: HeuristicFn[State] | None = None,
    ) -> None:
        self.edges = edges
        self._start = start
        self.finish = finish
        self._estimate = estimate or constant_estimate(1.0)
        self.curr = start

    def start(self) -> State:
        return self._start

    def is_goal(self) -> bool:
        return self.curr == self.finish

    def move_to(self, state: State) -> None:
        self.curr = state

    def successors(self) -> Iterable[State]:
        return list(self.edges.get(self.curr, {}))

    def cost(self, state: State) -> float:
        return float(self.edges[self.curr][state])

    def estimate(self, state: State) -> float:
        return float(self._estimate(state))


def undirected(edges: Iterable[tuple[State, State, float]]) -> dict[State, dict[State, float]]:
    graph: dict[State, dict[State, float]] = {}
    for u, v, c in edges:
        graph.setdefault(u, {})[v] = c
        graph.setdefault(v, {})[u] = c
    return graph


# Romanian road map (Russell & Norvig, AIMA 3rd ed., p. 68)
ROMANIA_ROADS: dict[str, dict[str, float]] = {
    "Arad": {"Zerind": 75, "Timișoara": 118, "Sibiu": 140},
    "Bucharest": {"Pitești": 101, "Făgăraș": 211, "Urziceni": 85, "Giurgiu": 90},
    "Craiova": {"Drobeta": 120, "Râmnicu Vâlcea": 146, "Pitești": 138},
    "Drobeta": {"Mehadia": 75, "Craiova": 120},
    "Eforie": {"Hârșova": 86},
    "Făgăraș": {"Sibiu": 99, "Bucharest": 211},
    "Giurgiu": {"Bucharest": 90},
    "Hârșova": {"Urziceni": 98, "Eforie": 86},
    "Iași": {"Neamt": 87, "Vaslui": 92},
    "Lugoj": {"Timișoara": 111, "Mehadia": 70},
    "Mehadia": {"Lugoj": 70, "Drobeta": 75},
    "Neamt": {"Iași": 87},
    "Oradea": {"Zerind": 71, "Sibiu": 151},
    "Pitești": {"Râmnicu Vâlcea": 97, "Craiova": 138, "Bucharest": 101},
    "Râmnicu Vâlcea": {"Sibiu": 80, "Pitești": 97, "Craiova": 146},
    "Sibiu": {"Arad": 140, "Oradea": 151, "Făgăraș": 99, "Râmnicu Vâlcea": 80},
    "Timișoara": {"Arad": 118, "Lugoj": 111},
    "Urziceni": {"Bucharest": 85, "Vaslui": 142, "Hârșova": 98},
    "Vaslui": {"Urziceni": 142, "Iași": 92},
    "Zerind": {"Arad": 75, "Oradea": 71},
}

# Straight-line distances to Bucharest (ibid., fig. 3.22)
BUCHAREST_SLD: dict[str, float] = {
    "Arad": 366,
    "Bucharest": 0,
    "Craiova": 160,
    "Drobeta": 242,
    "Eforie": 161,
    "Făgăraș": 176,
    "Giurgiu": 77,
    "Hârșova": 151,
    "Iași": 226,
    "Lugoj": 244,
    "Mehadia": 241,
    "Neamt": 234,
    "Oradea": 380,
    "Pitești": 100,
    "Râmnicu Vâlcea": 193,
    "Sibiu": 253,
    "Timișoara": 329,
    "Urziceni": 80,
    "Vaslui": 199,
    "Zerind": 374,
}


def romania_policy(start: str = "Arad") -> GraphPolicy[str]:
    def h(city: str) -> float:
        return BUCHAREST_SLD[city]

    return GraphPolicy(ROMANIA_ROADS, start, "Bucharest", h)


# Water pouring puzzle


@dataclass(frozen=True)
class PouringState:
    action: str
    first: int
    second: int


@dataclass
class PouringPuzzle:
    """Measure ``goal`` units using two glasses that can be filled, emptied and poured."""

    cap_first: int = 9
    cap_second: int = 4
    goal: int = 6
    curr: PouringState = field(default_factory=lambda: PouringState("Both Empty", 0, 0))

    def start(self) -> PouringState:
        return PouringState("Both Empty", 0, 0)

    def is_goal(self) -> bool:
        return self.goal in (self.curr.first, self.curr.second)

    def move_to(self, state: PouringState) -> None:
        self.curr = state

    def cost(self, _state: PouringState) -> float:
        return 1.0

    def estimate(self, _state: PouringState) -> float:
        return 1.0

    def successors(self) -> list[PouringState]:
        first, second = self.curr.first, self.curr.second
        cap1, cap2 = self.cap_first, self.cap_second
        succ = [
            PouringState("Fill First", cap1, second),
            PouringState("Fill Second", first, cap2),
            PouringState("Empty First", 0, second),
            PouringState("Empty Second", first, 0),
        ]
        if first + second > cap2:
            succ.append(PouringState("First -> Second", first - (cap2 - second), cap2))
        else:
            succ.append(PouringState("First -> Second", 0, first + second))
        if first + second > cap1:
            succ.append(PouringState("Second -> First", cap1, second - (cap1 - first)))
        else:
            succ.append(PouringState("Second -> First", first + second, 0))
        return succ


def format_pouring(path: Iterable[PouringState]) -> str:
    return "\n".join(f"  {s.action:<16} ({s.first} {s.second})" for s in path)


# Counting: reach a target integer with a fixed set of operations

Operation = Callable[[int], int]


def parse_operations(spec: str) -> list[tuple[str, Operation]]:
    """Parse ``"+1,-1"`` / ``"-7,+5"`` / ``"-3,-7,*9"`` into named integer operations."""
    ops: list[tuple[str, Operation]] = []
    for tok in spec.split(","):
        tok = tok.strip()
        if len(tok) < 2 or tok[0] not in "+-*":
            raise ValueError(f"bad operation {tok!r}; expected +N, -N or *N")
        n = int(tok[1:])
        if tok[0] == "+":
            ops.append((tok, lambda x, n=n: x + n))
        elif tok[0] == "-":
            ops.append((tok, lambda x, n=n: x - n))
        else:
            ops.append((tok, lambda x, n=n: x * n))
    return ops


class CountingPolicy:
    def __init__(self, start: int = 1, target: int = 10, operations: str = "-1,+1") -> None:
        self._start = start
        self.target = target
        self.operations = parse_operations(operations)
        self.curr = start

    def start(self) -> int:
        return self._start

    def is_goal(self) -> bool:
        return self.curr == self.target

    def move_to(self, state: int) -> None:
        self.curr = state

    def successors(self) -> list[int]:
        return [op(self.curr) for _, op in self.operations]

    def cost(self, _state: int) -> float:
        return 1.0

    def estimate(self, state: int) -> float:
        return float(abs(self.target - state))
