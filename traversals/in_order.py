"""
in_order.py — In-Order Traversal
================================
Left subtree, node, right subtree.  On a search tree this reads the
values back in ascending order, which makes it the easiest order to
check by eye while the animation runs.
"""

from typing import List, Optional

from bst import Tree


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def InOrder(node):",                   # 0
    "    if node is empty: return",         # 1
    "    InOrder(node.left)",               # 2
    "    visit(node)",                      # 3
    "    InOrder(node.right)",              # 4
]


def in_order(tree: Tree) -> List[str]:
    visits: List[str] = []
    _walk(tree, tree.root_id, visits)
    return visits


def _walk(tree: Tree, node_id: Optional[str], visits: List[str]) -> None:
    if node_id is None:
        return
    node = tree.nodes[node_id]
    _walk(tree, node.left, visits)
    visits.append(node.id)
    _walk(tree, node.right, visits)
