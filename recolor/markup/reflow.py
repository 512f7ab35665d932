# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Resolution of overlapping markups into a flat sequence of colored spans.

The working list is kept sorted by ``(start, priority)``. On each step the
first element (``current``) is compared with the one following it (``next``):

    - ``next`` begins after ``current`` ends: ``current`` is final;
    - ``next`` begins inside ``current`` and outranks it: the part of
      ``current`` before ``next`` is final, the part after ``next`` goes
      back into the list;
    - ``next`` begins inside ``current`` but does not outrank it: ``next``
      loses the shared region, its tail (if any) goes back into the list.

Elements are never emitted out of order, because every element remaining in
the list starts at or after the start of ``next``.
"""
from __future__ import annotations

from bisect import bisect_right
from typing import Iterable, List, Tuple

from .markup import Markup
from .run import Run


class _WorkingList:
    def __init__(self, markups: Iterable[Markup]):
        self._items: List[Markup] = sorted(markups, key=lambda m: m.sort_key)
        self._keys: List[Tuple[int, int]] = [m.sort_key for m in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def peek(self) -> Markup:
        return self._items[0]

    def pop(self) -> Markup:
        self._keys.pop(0)
        return self._items.pop(0)

    def push_front(self, markup: Markup):
        self._keys.insert(0, markup.sort_key)
        self._items.insert(0, markup)

    def insert(self, markup: Markup):
        # equal keys: the newcomer goes after already present elements
        idx = bisect_right(self._keys, markup.sort_key)
        self._keys.insert(idx, markup.sort_key)
        self._items.insert(idx, markup)


def reflow(markups: Iterable[Markup]) -> List[Markup]:
    """
    Turn an arbitrary set of markups into an ordered sequence of
    non-overlapping markups covering the same positions. At each position
    the markup with the greatest priority wins.

    ``markups`` should include a baseline markup that spans the whole line,
    otherwise the result will have gaps wherever nothing was marked.
    Zero-length markups are never included in the result, except the case of
    an empty line, which is resolved into the lowest-priority markup.

    For example, a full-line baseline ``[0,6)`` with priority -1 and a markup
    ``[1,4)`` with priority 0 are resolved into ``[0,1)`` and ``[4,6)`` of the
    baseline color with ``[1,4)`` in between.
    """
    markups = list(markups)
    pending = _WorkingList(m for m in markups if not m.run.is_empty)
    if len(pending) == 0:
        return sorted(markups, key=lambda m: m.sort_key)[:1]

    result: List[Markup] = []
    while len(pending) > 1:
        current = pending.pop()
        next_ = pending.peek()

        if not current.run.overlapped_by(next_.run):
            result.append(current)
            continue

        if next_.priority > current.priority:
            left = Run.between(current.run.start, next_.run.start)
            right = Run.between(next_.run.end, current.run.end)
            if not left.is_empty:
                result.append(current.with_run(left))
            if not right.is_empty:
                pending.insert(current.with_run(right))
            continue

        pending.pop()
        tail = Run.between(current.run.end, next_.run.end)
        if not tail.is_empty:
            pending.insert(next_.with_run(tail))
        pending.push_front(current)

    result.append(pending.pop())
    return result
