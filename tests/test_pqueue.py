from __future__ import annotations

import random

import pytest

from huffcore.core.pqueue import PriorityQueue

pytestmark = pytest.mark.p0


def test_extracts_in_ascending_priority() -> None:
    rng = random.Random(7)
    prios = [rng.randint(0, 50) for _ in range(200)]

    q: PriorityQueue[int] = PriorityQueue()
    for i, p in enumerate(prios):
        q.insert(i, p)
    assert len(q) == 200

    out = [prios[q.extract_min()] for _ in range(200)]
    assert out == sorted(prios)
    assert q.is_empty()


def test_ties_break_by_insertion_order() -> None:
    q: PriorityQueue[str] = PriorityQueue()
    q.insert("b", 2)
    q.insert("x", 1)
    q.insert("c", 2)
    q.insert("y", 1)
    q.insert("a", 2)

    assert q.peek_priority() == 1
    assert [q.extract_min() for _ in range(5)] == ["x", "y", "b", "c", "a"]


def test_elements_are_never_compared() -> None:
    class Opaque:
        pass

    q: PriorityQueue[Opaque] = PriorityQueue()
    a, b = Opaque(), Opaque()
    q.insert(a, 1)
    q.insert(b, 1)
    assert q.extract_min() is a
    assert q.extract_min() is b


def test_empty_queue_errors() -> None:
    q: PriorityQueue[int] = PriorityQueue()
    assert q.is_empty()
    with pytest.raises(IndexError):
        q.extract_min()
    with pytest.raises(IndexError):
        q.peek_priority()
