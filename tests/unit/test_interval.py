import unittest

from chimannot.interval import Interval


class TestInterval(unittest.TestCase):

    def test___init__error(self):
        with self.assertRaises(AttributeError):
            Interval(4, 3)

    def test___init__point(self):
        temp = Interval(5)
        self.assertEqual(5, temp.start)
        self.assertEqual(5, temp.end)

    def test___get_item__(self):
        temp = Interval(1, 2)
        self.assertEqual(1, temp[0])
        self.assertEqual(2, temp[1])
        with self.assertRaises(IndexError):
            temp[3]
        with self.assertRaises(IndexError):
            temp['1b']

    def test_overlaps_interior(self):
        self.assertFalse(Interval.overlaps_interior((1, 10), (10, 11)))
        self.assertFalse(Interval.overlaps_interior((10, 11), (1, 10)))
        self.assertTrue(Interval.overlaps_interior((1, 10), (9, 11)))
        self.assertTrue(Interval.overlaps_interior((100, 200), (100, 200)))
        self.assertFalse(Interval.overlaps_interior((100, 200), (300, 400)))

    def test___len__(self):
        self.assertEqual(5, len(Interval(1, 5)))
        self.assertEqual(1, len(Interval(7)))

    def test_eq(self):
        self.assertEqual(Interval(1, 2), Interval(1, 2))
        self.assertNotEqual(Interval(1, 2), Interval(1, 3))
        self.assertEqual(Interval(1, 2), (1, 2))

    def test_union(self):
        self.assertEqual(Interval(1, 21), Interval.union((1, 2), (4, 6), (4, 9), (20, 21)))
        with self.assertRaises(AttributeError):
            Interval.union()
