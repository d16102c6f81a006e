"""
pre_order.py — Pre-Order Traversal
==================================
Visits a node before either of its subtrees: node, left, right.
The root is always the first id in the output.
"""

from typing import List, Optional

from bst import Tree


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def PreOrder(node):",                  # 0
    "    if node is empty: return",         # 1
    "    visit(node)",                      # 2
    "    PreOrder(node.left)",              # 3
    "    PreOrder(node.right)",             # 4
]


def pre_order(tree: Tree) -> List[str]:
    visits: List[str] = []
    _walk(tree, tree.root_id, visits)
    return visits


def _walk(tree: Tree, node_id: Optional[str], visits: List[str]) -> None:
    if node_id is None:
        return
    node = tree.nodes[node_id]
    visits.append(node.id)
    _walk(tree, node.left, visits)
    _walk(tree, node.right, visits)
