"""
post_order.py — Post-Order Traversal
====================================
Both subtrees before the node: left, right, node.  The root is always
visited last.
"""

from typing import List, Optional

from bst import Tree


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def PostOrder(node):",                 # 0
    "    if node is empty: return",         # 1
    "    PostOrder(node.left)",             # 2
    "    PostOrder(node.right)",            # 3
    "    visit(node)",                      # 4
]


def post_order(tree: Tree) -> List[str]:
    visits: List[str] = []
    _walk(tree, tree.root_id, visits)
    return visits


def _walk(tree: Tree, node_id: Optional[str], visits: List[str]) -> None:
    if node_id is None:
        return
    node = tree.nodes[node_id]
    _walk(tree, node.left, visits)
    _walk(tree, node.right, visits)
    visits.append(node.id)
