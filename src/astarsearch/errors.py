from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class SearchError(Exception):
    """Base class for errors raised by astarsearch."""


class NotFoundError(SearchError):
    """The goal cannot be reached from the start state."""

    def __init__(self, explored: Sequence[Any] = ()) -> None:
        super().__init__("final state is not reachable")
        self.explored = list(explored)


class SearchStoppedError(SearchError):
    """A search limit tripped before the goal was reached."""

    def __init__(self, explored: Sequence[Any] = ()) -> None:
        super().__init__("search stopped by a limit before reaching the goal")
        self.explored = list(explored)
