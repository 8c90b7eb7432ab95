from __future__ import annotations

import heapq
import itertools
from typing import Generic, List, Tuple, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """
    Min-priority queue su heapq.

    Pareggi di priorità: vince l'elemento inserito per primo (contatore
    monotono come secondo campo della tupla), quindi l'ordine di estrazione
    è deterministico e gli elementi non vengono mai confrontati tra loro.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, T]] = []
        self._counter = itertools.count()

    def insert(self, element: T, priority: int) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), element))

    def extract_min(self) -> T:
        if not self._heap:
            raise IndexError("extract_min from empty priority queue")
        _, _, element = heapq.heappop(self._heap)
        return element

    def peek_priority(self) -> int:
        if not self._heap:
            raise IndexError("peek_priority on empty priority queue")
        return self._heap[0][0]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
