"""Randomized comparison of BalancedIntSet against a built-in set.

Every insert and delete is mirrored on a reference set and the whole tree is
re-verified after each call, except in the large drain test, which verifies
after every 50th key.
"""

import sys
import os
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from balanced_int_set import BalancedIntSet
from graph_export import to_dot
from tree_check import check_consistent, check_height_bound, check_with_set

SEED = 1
KEY_RANGE = 100
WIDE_KEY_RANGE = 110


class TestDifferential(unittest.TestCase):
    def setUp(self):
        np.random.seed(SEED)
        self.tree = BalancedIntSet()
        self.reference = set()

    def verify(self):
        check_consistent(self.tree)
        check_with_set(self.tree, self.reference)
        check_height_bound(self.tree)

    def random_key(self, high):
        return int(np.random.randint(0, high))

    def insert(self, k):
        was_present = k in self.reference
        self.assertEqual(self.tree.insert(k), was_present, f"insert({k})")
        self.reference.add(k)
        self.verify()

    def delete(self, k):
        was_present = k in self.reference
        self.assertEqual(self.tree.delete(k), was_present, f"delete({k})")
        self.reference.discard(k)
        self.verify()

    def toggle(self, k):
        if k in self.reference:
            self.delete(k)
        else:
            self.insert(k)

    def test_full_run(self):
        self.verify()
        for k in range(1, 11):
            self.insert(k)
        for _ in range(1000):
            self.insert(self.random_key(WIDE_KEY_RANGE))
        for _ in range(1000):
            self.delete(self.random_key(KEY_RANGE))
        for _ in range(10000):
            self.toggle(self.random_key(KEY_RANGE))
        for k in range(WIDE_KEY_RANGE + 1):
            self.delete(k)

        self.assertTrue(self.tree.is_empty())
        self.assertEqual(to_dot(self.tree), "digraph G {\n}\n")

    def test_toggle_churn_keeps_membership(self):
        for _ in range(10000):
            self.toggle(self.random_key(KEY_RANGE))
            k = self.random_key(KEY_RANGE)
            self.assertEqual(k in self.tree, k in self.reference)
        self.assertEqual(self.tree.in_order(), sorted(self.reference))

    def test_insert_heavy_then_drain_with_sampled_checks(self):
        keys = np.random.permutation(2000)
        for k in keys:
            self.tree.insert(int(k))
            self.reference.add(int(k))
        self.verify()
        for k in np.random.permutation(2000):
            self.assertTrue(self.tree.delete(int(k)))
            self.reference.discard(int(k))
            if k % 50 == 0:
                self.verify()
        self.verify()
        self.assertIsNone(self.tree.root)

    def test_double_insert_is_idempotent(self):
        for _ in range(200):
            k = self.random_key(KEY_RANGE)
            self.tree.insert(k)
            self.reference.add(k)
            before = self.tree.in_order()
            self.assertTrue(self.tree.insert(k))
            self.assertEqual(self.tree.in_order(), before)
        self.verify()


if __name__ == "__main__":
    unittest.main()
