"""Graphviz DOT output of a BalancedIntSet for offline inspection.

Each node is labelled ``"<value> ; <balance>"`` and each edge with the child
index (0 = left, 1 = right). Render with ``dot -Tpng tree.dot -o tree.png``.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from balanced_int_set import BalancedIntSet


def to_dot(tree: BalancedIntSet, include_head: bool = False) -> str:
    lines = ["digraph G {"]
    start = tree.head if include_head else tree.root
    names: Dict[int, str] = {}
    # (node, parent name, direction from parent)
    stack: List[Tuple[BalancedIntSet.Node, Optional[str], int]] = []
    if start is not None:
        stack.append((start, None, 0))

    while stack:
        node, parent, direction = stack.pop()
        name = names.get(id(node))
        if name is None:
            name = f"N{len(names)}"
            names[id(node)] = name
            lines.append(f'{name} [label="{node.value} ; {node.balance}"];')
            for i in (1, 0):
                child = node.child[i]
                if child is not None:
                    stack.append((child, name, i))
        if parent is not None:
            lines.append(f'{parent} -> {name} [label="{direction}"];')

    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(tree: BalancedIntSet, path: Union[str, Path], include_head: bool = False) -> None:
    Path(path).write_text(to_dot(tree, include_head=include_head))
