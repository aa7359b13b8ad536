"""A* search over a caller-supplied policy.

The open and closed sets are the frontier and the explored set. A state is
expanded at most once: once it leaves the frontier it is final, even if a
cheaper route to it shows up later. Paths are therefore optimal only for
consistent heuristics (``h(u) <= cost(u, v) + h(v)`` on every edge).
"""
from __future__ import annotations

from dataclasses import dataclass
import enum
import time
from typing import Any, Generic

from .core.types import Policy, S as State
from .errors import NotFoundError, SearchStoppedError
from .frontier import Frontier
from .logging import get_logger as _get_logger


class Outcome(enum.Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    STOPPED = "stopped"


@dataclass
class SearchStats:
    expansions: int = 0
    generated: int = 0
    improvements: int = 0
    runtime_ms: float = 0.0


@dataclass
class SearchParams:
    max_expansions: int | None = None
    max_runtime_ms: float | None = None
    log_every: int | None = None


class AStar(Generic[State]):
    """Single A* run. Frontier, explored set and predecessor map live only for one ``run()``."""

    def __init__(
        self,
        policy: Policy[State],
        *,
        params: SearchParams | None = None,
        logger: Any | None = None,
    ) -> None:
        cfg = params or SearchParams()
        self.policy = policy
        self.max_expansions = cfg.max_expansions
        self.max_runtime_ms = cfg.max_runtime_ms
        self.log_every = cfg.log_every
        self.logger = logger or _get_logger(__name__)
        self.stats = SearchStats()
        self.cost: float | None = None
        self._done = False

    def _stop_reason(self, t0: float) -> str | None:
        if self.max_runtime_ms is not None:
            if (time.perf_counter() - t0) * 1000.0 > self.max_runtime_ms:
                return "max_runtime_ms reached"
        if self.max_expansions is not None and self.stats.expansions >= self.max_expansions:
            return "max_expansions reached"
        return None

    @staticmethod
    def _reconstruct(goal: State, parent: dict[State, State]) -> list[State]:
        path = [goal]
        cur = goal
        while cur in parent:
            cur = parent[cur]
            path.append(cur)
        path.reverse()
        return path

    def run(self) -> tuple[list[State], list[State], Outcome]:
        if self._done:
            raise RuntimeError("an AStar instance runs only once; create a new one")
        self._done = True
        t0 = time.perf_counter()
        try:
            return self._search(t0)
        finally:
            self.stats.runtime_ms += (time.perf_counter() - t0) * 1000.0

    def _search(self, t0: float) -> tuple[list[State], list[State], Outcome]:
        p = self.policy
        start = p.start()
        frontier: Frontier[State] = Frontier()
        frontier.insert(start, 0.0, p.estimate(start))
        explored: set[State] = set()
        parent: dict[State, State] = {}
        steps: list[State] = []
        p.move_to(start)
        self.logger.debug("search started at %r", start)

        while not frontier.is_empty():
            reason = self._stop_reason(t0)
            if reason is not None:
                self.logger.info("%s; stopping search", reason)
                return [], steps, Outcome.STOPPED

            current, g_cur = frontier.extract_min()
            explored.add(current)
            p.move_to(current)
            steps.append(current)
            self.stats.expansions += 1
            if self.log_every and (self.stats.expansions % self.log_every == 0):
                self.logger.info(
                    "expansions=%(exp)d, generated=%(gen)d, frontier=%(open)d",
                    {
                        "exp": self.stats.expansions,
                        "gen": self.stats.generated,
                        "open": len(frontier),
                    },
                )

            if p.is_goal():
                self.cost = g_cur
                self.logger.debug(
                    "goal %r reached: cost=%s, expansions=%d", current, g_cur, self.stats.expansions
                )
                return self._reconstruct(current, parent), steps, Outcome.FOUND

            for succ in p.successors():
                self.stats.generated += 1
                if succ in explored:
                    continue
                new_g = g_cur + float(p.cost(succ))
                entry = frontier.get(succ)
                if entry is not None:
                    if new_g < entry.g:
                        frontier.decrease_priority(entry, new_g)
                        parent[succ] = current
                        self.stats.improvements += 1
                else:
                    frontier.insert(succ, new_g, p.estimate(succ))
                    parent[succ] = current

        self.logger.debug("frontier exhausted after %d expansions", self.stats.expansions)
        return [], steps, Outcome.NOT_FOUND


def search(
    policy: Policy[State],
    *,
    params: SearchParams | None = None,
    logger: Any | None = None,
) -> tuple[list[State], list[State], Outcome]:
    """Run A* from ``policy.start()``.

    Returns ``(path, explored, outcome)``. ``path`` runs from start to goal and
    is empty unless ``outcome`` is ``Outcome.FOUND``; ``explored`` lists the
    expanded states in expansion order.
    """
    return AStar(policy, params=params, logger=logger).run()


def find_path(
    policy: Policy[State],
    *,
    params: SearchParams | None = None,
    logger: Any | None = None,
) -> list[State]:
    """Like :func:`search` but returns only the path, raising ``NotFoundError`` without one."""
    path, explored, outcome = search(policy, params=params, logger=logger)
    if outcome is Outcome.STOPPED:
        raise SearchStoppedError(explored)
    if outcome is Outcome.NOT_FOUND:
        raise NotFoundError(explored)
    return path
