from typing import Any, List


class PathEntry:
    """One step of a recorded descent: the node visited and the side taken.

    ``a`` is -1 for a step to the left child and +1 for a step to the right
    child; ``direction`` is the matching child index (0 or 1).
    """

    def __init__(self, node: Any, a: int) -> None:
        self.node = node
        self.a: int = a
        self.direction: int = 0 if a < 0 else 1

    def __repr__(self) -> str:
        return f"PathEntry({getattr(self.node, 'value', self.node)!r}, {self.a})"


class AncestorStack:
    def __init__(self) -> None:
        self._data: List[PathEntry] = []

    def push(self, node: Any, a: int) -> PathEntry:
        if a not in (-1, 1):
            raise ValueError("a must be -1 or 1")
        entry = PathEntry(node, a)
        self._data.append(entry)
        return entry

    def pop(self) -> PathEntry:
        if not self._data:
            raise IndexError("pop from empty stack")
        return self._data.pop()

    def top(self) -> PathEntry:
        if not self._data:
            raise IndexError("top from empty stack")
        return self._data[-1]

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0
