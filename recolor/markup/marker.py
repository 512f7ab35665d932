# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import re
from abc import ABCMeta, abstractmethod
from typing import Iterable, List, Pattern

from .color import Color
from .markup import Markup
from ..common import ColorError, RuleError
from ..console import Console, ConsoleDebugBuffer


class AbstractMarker(metaclass=ABCMeta):
    def __init__(self, color: Color, priority: int):
        self._color = color
        self._priority = priority

    @abstractmethod
    def mark(self, line: str) -> List[Markup]: raise NotImplementedError

    @property
    def color(self) -> Color:
        return self._color

    @property
    def priority(self) -> int:
        return self._priority


class BaselineMarker(AbstractMarker):
    PRIORITY = -1

    def __init__(self, color: Color):
        super().__init__(color, self.PRIORITY)

    def mark(self, line: str) -> List[Markup]:
        return [Markup.create(0, len(line), self._color, self._priority)]

    def __repr__(self):
        return f'{self.__class__.__name__}[{self._color!r}]'


class Marker(AbstractMarker):
    RULE_SEPARATOR = '='
    MATCH_ALL_SUFFIX = '*'

    def __init__(self, pattern: Pattern, match_all: bool, color: Color, priority: int):
        super().__init__(color, priority)
        self._pattern = pattern
        self._match_all = match_all

    @classmethod
    def from_rule(cls, rule: str, priority: int) -> Marker | None:
        """
        Build a marker from ``COLOR[*]=REGEX`` argument. Return *None* if
        the argument is not a rule (no separator or one of the sides is
        empty).

        :raises RuleError: if color or regular expression is invalid.
        """
        color_spec, _, pattern_spec = rule.lstrip().partition(cls.RULE_SEPARATOR)
        if not color_spec or not pattern_spec:
            return None

        match_all = color_spec.endswith(cls.MATCH_ALL_SUFFIX)
        if match_all:
            color_spec = color_spec[:-len(cls.MATCH_ALL_SUFFIX)]

        try:
            color = Color.parse(color_spec)
        except ColorError as e:
            raise RuleError(f'Invalid color in rule {rule!r}: {e!s}') from e
        try:
            pattern = re.compile(pattern_spec)
        except re.error as e:
            raise RuleError(f'Invalid regular expression in rule {rule!r}: {e!s}') from e

        return cls(pattern, match_all, color, priority)

    def mark(self, line: str) -> List[Markup]:
        if self._match_all:
            matches = self._pattern.finditer(line)
        else:
            matches = filter(None, [self._pattern.search(line)])

        return [Markup.create(m.start(), m.end() - m.start(), self._color, self._priority)
                for m in matches]

    @property
    def pattern(self) -> Pattern:
        return self._pattern

    @property
    def match_all(self) -> bool:
        return self._match_all

    def __repr__(self):
        suffix = self.MATCH_ALL_SUFFIX if self._match_all else ''
        return f'{self.__class__.__name__}[/{self._pattern.pattern}/{suffix},{self._color!r},p={self._priority}]'


class MarkerRegistry:
    def __init__(self, rules: Iterable[str], ambient: Color):
        self._debug_buffer = ConsoleDebugBuffer('markers')
        self._baseline = BaselineMarker(ambient)
        self._markers: List[Marker] = []

        for rule in rules:
            marker = Marker.from_rule(rule, len(self._markers))
            if marker is None:
                Console.warn(f'Not a rule, ignoring: {rule!r}')
                continue
            self._markers.append(marker)
            self._debug_buffer.write(1, f'Registered {marker!r}')

    @property
    def baseline(self) -> BaselineMarker:
        return self._baseline

    @property
    def markers(self) -> List[Marker]:
        return self._markers

    def mark(self, line: str) -> List[Markup]:
        markups = self._baseline.mark(line)
        for marker in self._markers:
            markups.extend(marker.mark(line))
        return markups
