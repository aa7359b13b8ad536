from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Protocol, TypeVar

S = TypeVar("S", bound=Hashable)
_StateContra_contra = TypeVar("_StateContra_contra", bound=Hashable, contravariant=True)


class HeuristicFn(Protocol[_StateContra_contra]):
    def __call__(self, state: _StateContra_contra) -> float: ...


class Policy(Protocol[S]):
    """State space explored by the search engine.

    The policy keeps a cursor: ``is_goal``, ``successors`` and ``cost`` are all
    evaluated relative to the state last passed to ``move_to``.
    """

    def start(self) -> S: ...

    def is_goal(self) -> bool: ...

    def move_to(self, state: S) -> None: ...

    def successors(self) -> Iterable[S]: ...

    def cost(self, state: S) -> float: ...

    def estimate(self, state: S) -> float: ...
