# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import random
import re
import unittest
from typing import List, Tuple

import pytermor as pt

from recolor.markup import BaselineMarker, Color, Marker, Markup, reflow

DEFAULT = Color()
RED = Color(pt.cv.RED)
BLUE = Color(pt.cv.BLUE)


def spans(resolved: List[Markup]) -> List[Tuple[int, int, Color]]:
    return [(m.run.start, m.run.end, m.color) for m in resolved]


def baseline(line: str) -> Markup:
    return BaselineMarker(DEFAULT).mark(line)[0]


class ReflowExamplesTestCase(unittest.TestCase):
    def test_later_rule_wins_overlap(self):
        line = 'abcdef'
        a = Markup.create(1, 3, RED, 0)
        b = Markup.create(3, 3, BLUE, 1)

        resolved = reflow([baseline(line), a, b])

        self.assertEqual(spans(resolved), [(0, 1, DEFAULT), (1, 3, RED), (3, 6, BLUE)])

    def test_earlier_rule_loses_overlap(self):
        line = 'abcdef'
        a = Markup.create(1, 3, RED, 1)
        b = Markup.create(3, 3, BLUE, 0)

        resolved = reflow([baseline(line), a, b])

        self.assertEqual(spans(resolved), [(0, 1, DEFAULT), (1, 4, RED), (4, 6, BLUE)])

    def test_input_order_does_not_matter(self):
        line = 'abcdef'
        a = Markup.create(1, 3, RED, 0)
        b = Markup.create(3, 3, BLUE, 1)

        self.assertEqual(reflow([b, a, baseline(line)]), reflow([baseline(line), a, b]))

    def test_no_matches(self):
        self.assertEqual(reflow([baseline('abcdef')]), [baseline('abcdef')])

    def test_empty_line(self):
        resolved = reflow([baseline(''), Markup.create(0, 0, RED, 0)])

        self.assertEqual(resolved, [baseline('')])

    def test_zero_length_markups_are_dropped(self):
        resolved = reflow([baseline('abc'), Markup.create(1, 0, RED, 0), Markup.create(3, 0, BLUE, 1)])

        self.assertEqual(spans(resolved), [(0, 3, DEFAULT)])

    def test_nested_higher_priority(self):
        resolved = reflow([baseline('abcdef'), Markup.create(1, 4, RED, 0), Markup.create(2, 1, BLUE, 1)])

        self.assertEqual(spans(resolved), [
            (0, 1, DEFAULT), (1, 2, RED), (2, 3, BLUE), (3, 5, RED), (5, 6, DEFAULT),
        ])

    def test_nested_lower_priority(self):
        resolved = reflow([baseline('abcdef'), Markup.create(1, 4, RED, 1), Markup.create(2, 1, BLUE, 0)])

        self.assertEqual(spans(resolved), [(0, 1, DEFAULT), (1, 5, RED), (5, 6, DEFAULT)])

    def test_same_start_higher_priority_wins(self):
        resolved = reflow([baseline('abcdef'), Markup.create(0, 2, BLUE, 1), Markup.create(0, 4, RED, 0)])

        self.assertEqual(spans(resolved), [(0, 2, BLUE), (2, 4, RED), (4, 6, DEFAULT)])

    def test_equal_key_tie_keeps_discovery_order(self):
        first = Markup.create(1, 2, RED, 0)
        second = Markup.create(1, 4, BLUE, 0)

        resolved = reflow([baseline('abcdef'), first, second])

        self.assertEqual(spans(resolved), [(0, 1, DEFAULT), (1, 3, RED), (3, 5, BLUE), (5, 6, DEFAULT)])

    def test_non_overlapping_markups_are_kept(self):
        a = Markup.create(0, 2, RED, 0)
        b = Markup.create(3, 1, BLUE, 1)
        c = Markup.create(4, 2, RED, 2)

        resolved = reflow([baseline('abcdef'), c, a, b])

        self.assertEqual(resolved, [a, Markup.create(2, 1, DEFAULT, -1), b, c])

    def test_first_match_only_marker(self):
        line = 'foo foo'
        marker = Marker(re.compile('foo'), False, RED, 0)

        resolved = reflow([baseline(line), *marker.mark(line)])

        self.assertEqual(spans(resolved), [(0, 3, RED), (3, 7, DEFAULT)])

    def test_match_all_marker(self):
        line = 'foo foo'
        marker = Marker(re.compile('foo'), True, RED, 0)

        resolved = reflow([baseline(line), *marker.mark(line)])

        self.assertEqual(spans(resolved), [(0, 3, RED), (3, 4, DEFAULT), (4, 7, RED)])


class ReflowPropertiesTestCase(unittest.TestCase):
    ITERATIONS = 500

    def setUp(self) -> None:
        self.rnd = random.Random(1337)

    def test_random_inputs(self):
        for _ in range(self.ITERATIONS):
            line_len = self.rnd.randint(0, 24)
            markups = self._make_markups(line_len)

            resolved = reflow(markups)

            with self.subTest(markups=markups, resolved=resolved):
                self._assert_tiling(line_len, resolved)
                self._assert_priorities(line_len, markups, resolved)

    def _make_markups(self, line_len: int) -> List[Markup]:
        count = self.rnd.randint(0, 6)
        priorities = list(range(count))
        self.rnd.shuffle(priorities)

        markups = [Markup.create(0, line_len, DEFAULT, -1)]
        for priority in priorities:
            start = self.rnd.randint(0, line_len)
            length = self.rnd.randint(0, line_len - start)
            markups.append(Markup.create(start, length, Color(pt.cv.RED), priority))
        self.rnd.shuffle(markups)
        return markups

    def _assert_tiling(self, line_len: int, resolved: List[Markup]):
        self.assertGreater(len(resolved), 0)
        if line_len == 0:
            self.assertEqual(len(resolved), 1)
            return

        position = 0
        for markup in resolved:
            self.assertFalse(markup.run.is_empty)
            self.assertEqual(markup.run.start, position)
            position = markup.run.end
        self.assertEqual(position, line_len)

    def _assert_priorities(self, line_len: int, markups: List[Markup], resolved: List[Markup]):
        for position in range(line_len):
            expected = max(m.priority for m in markups if m.run.start <= position < m.run.end)
            actual = [m.priority for m in resolved if m.run.start <= position < m.run.end]
            self.assertEqual(actual, [expected], f'position {position}')


if __name__ == '__main__':
    unittest.main()
