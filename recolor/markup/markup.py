# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Tuple

from .color import Color
from .run import Run


class Markup:
    def __init__(self, run: Run, color: Color, priority: int):
        self._run = run
        self._color = color
        self._priority = priority

    @classmethod
    def create(cls, start: int, length: int, color: Color, priority: int) -> Markup:
        return cls(Run(start, length), color, priority)

    def with_run(self, run: Run) -> Markup:
        return Markup(run, self._color, self._priority)

    @property
    def run(self) -> Run:
        return self._run

    @property
    def color(self) -> Color:
        return self._color

    @property
    def priority(self) -> int:
        return self._priority

    @property
    def sort_key(self) -> Tuple[int, int]:
        return self._run.start, self._priority

    def __eq__(self, other: Markup):
        if not isinstance(other, Markup):
            return False
        return self._run == other._run \
               and self._color == other._color \
               and self._priority == other._priority

    def __repr__(self):
        return f'{self.__class__.__name__}[{self._run!r},{self._color!r},p={self._priority}]'
