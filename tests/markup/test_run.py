# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import unittest

from recolor.markup import Run


class RunTestCase(unittest.TestCase):
    def test_derived_properties(self):
        run = Run(2, 3)

        self.assertEqual(run.end, 5)
        self.assertFalse(run.is_empty)
        self.assertTrue(Run(4, 0).is_empty)

    def test_negative_values_are_rejected(self):
        self.assertRaises(ValueError, Run, -1, 2)
        self.assertRaises(ValueError, Run, 1, -2)

    def test_between_clamps_to_empty(self):
        self.assertEqual(Run.between(3, 7), Run(3, 4))
        self.assertEqual(Run.between(6, 4), Run(6, 0))

    def test_overlapped_by_start_inside(self):
        self.assertTrue(Run(1, 3).overlapped_by(Run(1, 1)))
        self.assertTrue(Run(1, 3).overlapped_by(Run(3, 5)))

    def test_overlapped_by_start_at_end(self):
        self.assertFalse(Run(1, 3).overlapped_by(Run(4, 2)))

    def test_overlapped_by_is_directional(self):
        self.assertTrue(Run(0, 6).overlapped_by(Run(2, 1)))
        self.assertFalse(Run(2, 1).overlapped_by(Run(0, 6)))

    def test_empty_run_is_never_overlapped(self):
        self.assertFalse(Run(3, 0).overlapped_by(Run(3, 2)))


if __name__ == '__main__':
    unittest.main()
