# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import io
import re
import unittest

import pytermor as pt

from recolor import RuleError
from recolor.console import Console
from recolor.markup import BaselineMarker, Color, Marker, MarkerRegistry, Markup, Run
from recolor.settings import SettingsManager


class MarkerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()
        self.red = Color(pt.cv.RED)

    def test_match_all(self):
        marker = Marker(re.compile('o+'), True, self.red, 3)

        markups = marker.mark('foo boo zoo')

        self.assertEqual([m.run for m in markups], [Run(1, 2), Run(5, 2), Run(9, 2)])
        self.assertTrue(all(m.color == self.red and m.priority == 3 for m in markups))

    def test_first_match_only(self):
        marker = Marker(re.compile('o+'), False, self.red, 0)

        self.assertEqual(marker.mark('foo boo'), [Markup(Run(1, 2), self.red, 0)])

    def test_no_match(self):
        marker = Marker(re.compile('x'), True, self.red, 0)

        self.assertEqual(marker.mark('foo boo'), [])

    def test_baseline(self):
        marker = BaselineMarker(Color())

        self.assertEqual(marker.mark('abcdef'), [Markup(Run(0, 6), Color(), -1)])
        self.assertEqual(marker.mark(''), [Markup(Run(0, 0), Color(), -1)])


class MarkerRuleTestCase(unittest.TestCase):
    def test_first_match_rule(self):
        marker = Marker.from_rule('red=\\d+', 2)

        self.assertFalse(marker.match_all)
        self.assertEqual(marker.pattern.pattern, '\\d+')
        self.assertEqual(marker.color, Color(pt.cv.HI_RED))
        self.assertEqual(marker.priority, 2)

    def test_match_all_rule(self):
        marker = Marker.from_rule('1f*=a=b', 0)

        self.assertTrue(marker.match_all)
        self.assertEqual(marker.pattern.pattern, 'a=b')
        self.assertEqual(marker.color, Color(pt.cv.HI_WHITE, pt.cv.BLUE))

    def test_leading_whitespace_is_ignored(self):
        self.assertIsNotNone(Marker.from_rule('   red=x', 0))

    def test_not_a_rule(self):
        self.assertIsNone(Marker.from_rule('red', 0))
        self.assertIsNone(Marker.from_rule('red=', 0))
        self.assertIsNone(Marker.from_rule('=x', 0))

    def test_invalid_color(self):
        self.assertRaises(RuleError, Marker.from_rule, 'nosuchcolor=x', 0)

    def test_invalid_regex(self):
        self.assertRaises(RuleError, Marker.from_rule, 'red=(x', 0)


class MarkerRegistryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()
        self._console_io = Console.io
        Console.io = io.StringIO()

    def tearDown(self) -> None:
        Console.io = self._console_io

    def test_priorities_follow_declaration_order(self):
        registry = MarkerRegistry(['red=a', 'blue*=b', 'green=c'], Color())

        self.assertEqual([m.priority for m in registry.markers], [0, 1, 2])
        self.assertEqual(registry.baseline.priority, -1)

    def test_non_rules_are_skipped_with_warning(self):
        registry = MarkerRegistry(['red=a', 'junk', 'blue=b'], Color())

        self.assertEqual([m.priority for m in registry.markers], [0, 1])
        self.assertIn('junk', Console.io.getvalue())

    def test_mark_puts_baseline_first(self):
        ambient = Color(pt.cv.GRAY)
        registry = MarkerRegistry(['red*=a'], ambient)

        markups = registry.mark('banana')

        self.assertEqual(markups[0], Markup(Run(0, 6), ambient, -1))
        self.assertEqual([m.run.start for m in markups[1:]], [1, 3, 5])


if __name__ == '__main__':
    unittest.main()
