# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations


class Run:
    """
    Half-open range ``[start, start + length)`` of character positions
    within a line.
    """
    def __init__(self, start: int, length: int):
        if start < 0 or length < 0:
            raise ValueError(f'Run cannot have negative start or length: ({start}, {length})')
        self._start = start
        self._length = length

    @classmethod
    def between(cls, start: int, end: int) -> Run:
        return cls(start, max(0, end - start))

    @property
    def start(self) -> int:
        return self._start

    @property
    def length(self) -> int:
        return self._length

    @property
    def end(self) -> int:
        return self._start + self._length

    @property
    def is_empty(self) -> bool:
        return self._length == 0

    def overlapped_by(self, other: Run) -> bool:
        """
        True if ``other`` begins inside this run. The check is directional:
        it is only meaningful when ``other`` does not start before ``self``.
        """
        return self._start <= other.start < self.end

    def __eq__(self, other: Run):
        if not isinstance(other, Run):
            return False
        return self._start == other._start and self._length == other._length

    def __hash__(self):
        return hash((self._start, self._length))

    def __repr__(self):
        return f'{self.__class__.__name__}[{self._start}...{self.end}]({self._length})'
