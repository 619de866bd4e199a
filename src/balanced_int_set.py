"""Ordered set of integers stored in an AVL tree.

Insertion and deletion follow Knuth's iterative formulation (TAOCP vol. 3,
section 6.2.3): no recursion, no parent links. A permanent head node sits
above the tree and its right child is the real root, so an empty set needs
no special handling when attaching or detaching nodes. Children are indexed
0 (left) and 1 (right) so that one rotation routine serves both sides.
"""

from typing import List, Optional

from ancestor_stack import AncestorStack


class BalancedIntSet:
    class Node:
        def __init__(self, value: int = 0) -> None:
            self.value: int = value
            self.balance: int = 0
            self.child: List[Optional['BalancedIntSet.Node']] = [None, None]

        @property
        def left(self) -> Optional['BalancedIntSet.Node']:
            return self.child[0]

        @property
        def right(self) -> Optional['BalancedIntSet.Node']:
            return self.child[1]

        def __repr__(self) -> str:
            return f"Node({self.value}, balance={self.balance})"

    def __init__(self) -> None:
        self._head: BalancedIntSet.Node = BalancedIntSet.Node()
        self._size: int = 0

    @property
    def head(self) -> Node:
        return self._head

    @property
    def root(self) -> Optional[Node]:
        return self._head.child[1]

    def insert(self, k: int) -> bool:
        """Add ``k``. Returns True if it was already present, False if added."""
        head = self._head
        p = head.child[1]  # moves down the tree
        if p is None:
            head.child[1] = BalancedIntSet.Node(k)
            self._size += 1
            return False

        s = p     # deepest node on the path that may need rebalancing
        t = head  # parent of s
        while True:
            if k < p.value:
                direction = 0
            elif k == p.value:
                return True
            else:
                direction = 1
            q = p.child[direction]
            if q is None:
                q = BalancedIntSet.Node(k)
                p.child[direction] = q
                break
            if q.balance != 0:
                t = p
                s = q
            p = q
        self._size += 1

        if k < s.value:
            a, direction = -1, 0
        else:
            a, direction = 1, 1

        # Every node strictly between s and q had balance 0 and is now
        # one level taller on the side the new key went.
        r = p = s.child[direction]
        while p is not q:
            if k < p.value:
                p.balance = -1
                p = p.child[0]
            else:
                p.balance = 1
                p = p.child[1]

        if s.balance == 0:
            s.balance = a
            return False
        if s.balance == -a:
            s.balance = 0
            return False

        if r.balance == a:
            p = self._rotate_single(r, s, direction)
        elif r.balance == -a:
            p = self._rotate_double(r, s, direction)
        else:
            raise RuntimeError("unbalanced in an unexpected way")

        if s is t.child[1]:
            t.child[1] = p
        else:
            t.child[0] = p
        return False

    def delete(self, k: int) -> bool:
        """Remove ``k``. Returns True if it was removed, False if absent."""
        stack = AncestorStack()
        stack.push(self._head, 1)
        p = self._head.child[1]
        while True:
            if p is None:
                return False
            if k < p.value:
                stack.push(p, -1)
                p = p.child[0]
            elif k > p.value:
                stack.push(p, 1)
                p = p.child[1]
            else:
                break

        removed = p
        parent = stack.top()
        if p.child[0] is not None and p.child[1] is not None:
            # Swap in the in-order successor, which has no left child.
            # Rebalancing then starts from the successor's old position.
            removed_parent = parent
            removed_entry = stack.push(p, 1)
            p = p.child[1]
            while p.child[0] is not None:
                stack.push(p, -1)
                p = p.child[0]
            successor_right = p.child[1]

            removed_parent.node.child[removed_parent.direction] = p
            p.child[0] = removed.child[0]
            p.child[1] = removed.child[1]
            p.balance = removed.balance
            removed_entry.node = p

            parent = stack.top()
            parent.node.child[parent.direction] = successor_right
        elif p.child[0] is not None:
            parent.node.child[parent.direction] = p.child[0]
        else:
            parent.node.child[parent.direction] = p.child[1]

        removed.child[0] = removed.child[1] = None
        self._size -= 1

        # The head entry stays at the bottom of the stack.
        while len(stack) > 1:
            entry = stack.pop()
            node = entry.node
            a = entry.a
            if node.balance == a:
                # shorter side got shorter again; height dropped, keep going
                node.balance = 0
                continue
            if node.balance == 0:
                node.balance = -a
                return True
            if node.balance != -a:
                raise RuntimeError("unexpected balance value")

            direction = 1 - entry.direction
            r = node.child[direction]
            parent = stack.top()
            if r.balance == -a:
                p = self._rotate_single(r, node, direction)
                parent.node.child[parent.direction] = p
            elif r.balance == a:
                p = self._rotate_double(r, node, direction)
                parent.node.child[parent.direction] = p
            elif r.balance == 0:
                # r's subtrees were equally tall: the height is unchanged.
                p = self._rotate_single(r, node, direction)
                parent.node.child[parent.direction] = p
                node.balance = -a
                p.balance = a
                return True
            else:
                raise RuntimeError("unexpected balance value")
        return True

    @staticmethod
    def _rotate_single(r: Node, s: Node, direction: int) -> Node:
        # r is s.child[direction] and leans the same way
        s.child[direction] = r.child[1 - direction]
        r.child[1 - direction] = s
        s.balance = 0
        r.balance = 0
        return r

    @staticmethod
    def _rotate_double(r: Node, s: Node, direction: int) -> Node:
        # r is s.child[direction] and leans the other way; x becomes the root
        a = 1 if direction > 0 else -1
        x = r.child[1 - direction]
        r.child[1 - direction] = x.child[direction]
        x.child[direction] = r
        s.child[direction] = x.child[1 - direction]
        x.child[1 - direction] = s
        if x.balance == a:
            s.balance = -a
            r.balance = 0
        elif x.balance == 0:
            s.balance = 0
            r.balance = 0
        else:
            s.balance = 0
            r.balance = a
        x.balance = 0
        return x

    def contains(self, k: int) -> bool:
        node = self._head.child[1]
        while node is not None:
            if k < node.value:
                node = node.child[0]
            elif k > node.value:
                node = node.child[1]
            else:
                return True
        return False

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._head.child[1] = None
        self._size = 0

    def height(self) -> int:
        height = 0
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [c for node in level for c in node.child if c is not None]
        return height

    def in_order(self) -> List[int]:
        result: List[int] = []
        stack: List[BalancedIntSet.Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.child[0]
            node = stack.pop()
            result.append(node.value)
            node = node.child[1]
        return result

    def __len__(self) -> int:
        return self._size

    def __contains__(self, k: int) -> bool:
        return self.contains(k)

    def __repr__(self) -> str:
        return f"BalancedIntSet({self.in_order()})"

    def __str__(self) -> str:
        return f"BalancedIntSet(size={self._size}, height={self.height()})"
