from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from .core.types import S as State


@dataclass
class Entry(Generic[State]):
    """Frontier slot for one state; ``index`` follows the entry around the heap."""

    state: State
    g: float
    h: float
    seq: int
    index: int = -1

    @property
    def f(self) -> float:
        return self.g + self.h

    def sort_key(self) -> tuple[float, int]:
        return (self.g + self.h, self.seq)


class Frontier(Generic[State]):
    """Array-backed binary min-heap keyed by ``g + h`` with decrease-key.

    Ties on ``g + h`` go to the entry inserted first, so the extraction order
    is fully determined by the insertion sequence.
    """

    def __init__(self) -> None:
        self._heap: list[Entry[State]] = []
        self._live: dict[State, Entry[State]] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, s: State) -> bool:
        return s in self._live

    def is_empty(self) -> bool:
        return not self._heap

    def get(self, s: State) -> Entry[State] | None:
        return self._live.get(s)

    def peek(self) -> Entry[State]:
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0]

    def insert(self, state: State, g: float, h: float) -> Entry[State]:
        if state in self._live:
            raise ValueError(f"state {state!r} is already on the frontier")
        entry = Entry(state, float(g), float(h), self._counter, len(self._heap))
        self._counter += 1
        self._heap.append(entry)
        self._live[state] = entry
        self._sift_up(entry.index)
        return entry

    def decrease_priority(self, entry: Entry[State], new_g: float) -> None:
        if self._live.get(entry.state) is not entry:
            raise KeyError(entry.state)
        new_g = float(new_g)
        if not new_g < entry.g:
            raise ValueError(f"new cost {new_g} does not improve on {entry.g}")
        entry.g = new_g
        # only the key of this entry went down, so sifting up is enough
        self._sift_up(entry.index)

    def extract_min(self) -> tuple[State, float]:
        if not self._heap:
            raise IndexError("extract_min from an empty frontier")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            last.index = 0
            self._sift_down(0)
        del self._live[top.state]
        top.index = -1
        return top.state, top.g

    def _less(self, i: int, j: int) -> bool:
        return self._heap[i].sort_key() < self._heap[j].sort_key()

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].index = i
        heap[j].index = j

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        n = len(self._heap)
        while True:
            left = 2 * i + 1
            if left >= n:
                break
            child = left
            right = left + 1
            if right < n and self._less(right, left):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child
