import sys
import os
import tempfile
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from balanced_int_set import BalancedIntSet
from graph_export import to_dot, write_dot


def build(values):
    tree = BalancedIntSet()
    for v in values:
        tree.insert(v)
    return tree


class TestToDot(unittest.TestCase):
    def test_empty_tree(self):
        self.assertEqual(to_dot(BalancedIntSet()), "digraph G {\n}\n")

    def test_three_node_tree(self):
        dot = to_dot(build([20, 10, 30]))
        self.assertEqual(
            dot.splitlines(),
            [
                "digraph G {",
                'N0 [label="20 ; 0"];',
                'N1 [label="10 ; 0"];',
                'N0 -> N1 [label="0"];',
                'N2 [label="30 ; 0"];',
                'N0 -> N2 [label="1"];',
                "}",
            ],
        )

    def test_one_label_per_node_and_one_edge_per_link(self):
        tree = build(range(1, 11))
        lines = to_dot(tree).splitlines()
        labels = [line for line in lines if "->" not in line and "label" in line]
        edges = [line for line in lines if "->" in line]
        self.assertEqual(len(labels), 10)
        self.assertEqual(len(edges), 9)

    def test_label_carries_balance(self):
        dot = to_dot(build([10, 20]))
        self.assertIn('N0 [label="10 ; 1"];', dot)
        self.assertIn('N0 -> N1 [label="1"];', dot)

    def test_include_head(self):
        dot = to_dot(build([5]), include_head=True)
        lines = dot.splitlines()
        self.assertEqual(lines[1], 'N0 [label="0 ; 0"];')
        self.assertIn('N1 [label="5 ; 0"];', lines)
        self.assertIn('N0 -> N1 [label="1"];', lines)

    def test_shared_node_is_not_relabelled(self):
        tree = build([20, 10])
        tree.root.child[1] = tree.root.child[0]
        lines = to_dot(tree).splitlines()
        self.assertEqual(sum(1 for line in lines if 'label="10 ; 0"' in line), 1)
        self.assertIn('N0 -> N1 [label="0"];', lines)
        self.assertIn('N0 -> N1 [label="1"];', lines)

    def test_cycle_terminates(self):
        tree = build([20, 10])
        tree.root.child[0].child[0] = tree.root
        lines = to_dot(tree).splitlines()
        self.assertIn('N1 -> N0 [label="0"];', lines)


class TestWriteDot(unittest.TestCase):
    def test_writes_file(self):
        tree = build([10, 20, 30, 40, 50, 25])
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "tree.dot")
            write_dot(tree, path)
            with open(path) as f:
                content = f.read()
        self.assertEqual(content, to_dot(tree))
        self.assertTrue(content.startswith("digraph G {"))
        self.assertIn('[label="30 ; 0"]', content)


if __name__ == "__main__":
    unittest.main()
