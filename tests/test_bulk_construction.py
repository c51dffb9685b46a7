import math
import sys
import unittest
from pathlib import Path

_src = str(Path(__file__).resolve().parents[1] / "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from avltree.avl_tree import (
    AVLTree, BuildStrategy, Direction, InvalidArgument, RotationEvent, Traversal,
)
from test_avl_tree import assert_valid_avl


class TestFromInclusiveRange(unittest.TestCase):
    def test_one_to_seven_traversals(self):
        tree = AVLTree.from_inclusive_range(1, 7)
        self.assertEqual(tree.traverse(Traversal.IN_ORDER), [1, 2, 3, 4, 5, 6, 7])
        self.assertEqual(tree.traverse(Traversal.PRE_ORDER), [4, 2, 1, 3, 6, 5, 7])
        self.assertEqual(tree.traverse(Traversal.POST_ORDER), [1, 3, 2, 5, 7, 6, 4])
        self.assertEqual(tree.size(), 7)

    def test_single_value_range(self):
        tree = AVLTree.from_inclusive_range(5, 5)
        self.assertEqual(tree.in_order(), [5])
        self.assertEqual(tree.height(), 1)

    def test_negative_bounds(self):
        tree = AVLTree.from_inclusive_range(-3, 3)
        self.assertEqual(tree.in_order(), [-3, -2, -1, 0, 1, 2, 3])
        self.assertEqual(tree.pre_order()[0], 0)

    def test_max_below_min_raises(self):
        with self.assertRaises(InvalidArgument):
            AVLTree.from_inclusive_range(7, 1)

    def test_non_integer_bound_raises(self):
        with self.assertRaises(InvalidArgument):
            AVLTree.from_inclusive_range(1.5, 7)
        with self.assertRaises(InvalidArgument):
            AVLTree.from_inclusive_range(1, None)

    def test_height_is_minimum(self):
        for n in [1, 2, 3, 4, 7, 8, 15, 16, 100, 1000]:
            tree = AVLTree.from_inclusive_range(1, n)
            self.assertEqual(tree.height(), math.ceil(math.log2(n + 1)), msg=f"n={n}")
            assert_valid_avl(self, tree)

    def test_direct_build_performs_no_rotations(self):
        events = []
        AVLTree.from_inclusive_range(1, 100, on_rotate=events.append)
        self.assertEqual(events, [])

    def test_built_tree_accepts_further_mutations(self):
        events = []
        tree = AVLTree.from_inclusive_range(1, 7, on_rotate=events.append)
        for v in [8, 9, 10]:
            tree.add(v)
            assert_valid_avl(self, tree)
        self.assertTrue(events)
        tree.delete(1)
        assert_valid_avl(self, tree)
        self.assertEqual(tree.in_order(), [2, 3, 4, 5, 6, 7, 8, 9, 10])


class TestIncrementalStrategy(unittest.TestCase):
    def test_same_content_as_direct(self):
        for lo, hi in [(1, 1), (1, 7), (0, 20), (-10, 33)]:
            direct = AVLTree.from_inclusive_range(lo, hi)
            incremental = AVLTree.from_inclusive_range(
                lo, hi, strategy=BuildStrategy.INCREMENTAL
            )
            self.assertEqual(incremental.in_order(), direct.in_order())
            self.assertEqual(len(incremental), len(direct))
            assert_valid_avl(self, incremental)

    def test_one_to_seven_rotates_while_inserting_medians(self):
        events = []
        tree = AVLTree.from_inclusive_range(
            1, 7, strategy=BuildStrategy.INCREMENTAL, on_rotate=events.append
        )
        self.assertEqual(
            events,
            [RotationEvent(4, Direction.RIGHT), RotationEvent(2, Direction.LEFT)],
        )
        self.assertEqual(tree.pre_order(), [4, 2, 1, 3, 6, 5, 7])

    def test_incremental_rejects_reversed_range(self):
        with self.assertRaises(InvalidArgument):
            AVLTree.from_inclusive_range(3, 2, strategy=BuildStrategy.INCREMENTAL)

    def test_unknown_strategy_raises(self):
        with self.assertRaises(InvalidArgument):
            AVLTree.from_inclusive_range(1, 3, strategy="direct")


class TestFromSorted(unittest.TestCase):
    def test_round_trip(self):
        keys = [2, 3, 5, 7, 11, 13, 17, 19, 23]
        tree = AVLTree.from_sorted(keys)
        self.assertEqual(tree.traverse(Traversal.IN_ORDER), keys)
        self.assertEqual(tree.size(), len(keys))
        assert_valid_avl(self, tree)

    def test_round_trip_strings(self):
        keys = ["ant", "bee", "cat", "dog"]
        tree = AVLTree.from_sorted(keys)
        self.assertEqual(list(tree), keys)

    def test_accepts_any_iterable(self):
        tree = AVLTree.from_sorted(x * 2 for x in range(10))
        self.assertEqual(tree.in_order(), list(range(0, 20, 2)))

    def test_empty_sequence_gives_empty_tree(self):
        tree = AVLTree.from_sorted([])
        self.assertTrue(tree.is_empty())
        self.assertEqual(tree.height(), 0)

    def test_does_not_alias_input(self):
        keys = [1, 2, 3]
        tree = AVLTree.from_sorted(keys)
        keys.append(4)
        self.assertEqual(tree.in_order(), [1, 2, 3])

    def test_none_sequence_raises(self):
        with self.assertRaises(InvalidArgument):
            AVLTree.from_sorted(None)

    def test_none_element_raises(self):
        with self.assertRaises(InvalidArgument):
            AVLTree.from_sorted([1, None, 3])

    def test_duplicate_raises(self):
        with self.assertRaises(InvalidArgument):
            AVLTree.from_sorted([1, 2, 2, 3])

    def test_unsorted_raises(self):
        with self.assertRaises(InvalidArgument):
            AVLTree.from_sorted([1, 3, 2])

    def test_contains_and_delete_on_built_tree(self):
        tree = AVLTree.from_sorted(list(range(0, 100, 5)))
        self.assertTrue(tree.contains(45))
        self.assertFalse(tree.contains(46))
        tree.delete(45)
        self.assertFalse(tree.contains(45))
        assert_valid_avl(self, tree)


if __name__ == "__main__":
    unittest.main()
