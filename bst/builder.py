"""
builder.py — BST Construction
=============================
Inserts values one at a time.  Each value descends from the root:

    value <  node  →  go left
    value >  node  →  go right
    value == node  →  dropped, tree unchanged

When the side it wants is empty, a new node is created there.  Nothing
already in the tree is ever rewired, so the result stays connected and
acyclic.
"""

import logging
from typing import Iterable, Optional

from bst.tree import Tree


logger = logging.getLogger(__name__)


class TreeBuilder:
    """
    Incremental builder around one fresh Tree.

    Usage:
        builder = TreeBuilder()
        for v in values:
            builder.insert(v)
        tree = builder.tree
    """

    def __init__(self):
        self.tree = Tree()
        self.dropped = 0

    def insert(self, value: int) -> Optional[str]:
        """Insert `value`; returns the new node id, or None for a duplicate."""
        if self.tree.is_empty():
            return self.tree.add_root(value).id
        return self._insert_at(self.tree.root_id, value)

    def build(self, values: Iterable[int]) -> Tree:
        for value in values:
            self.insert(value)
        logger.info(
            "Built tree with %d node(s), height %d (%d duplicate(s) dropped)",
            self.tree.node_count(), self.tree.height(), self.dropped,
        )
        return self.tree

    # ------------------------------------------------------------------
    def _insert_at(self, current_id: str, value: int) -> Optional[str]:
        current = self.tree.nodes[current_id]
        if value == current.value:
            self.dropped += 1
            logger.debug("Dropped duplicate value %d", value)
            return None

        side = "L" if value < current.value else "R"
        child_id = current.child(side)
        if child_id is not None:
            return self._insert_at(child_id, value)

        node = self.tree.add_child(current_id, side, value)
        logger.debug("Inserted %d as %s (%s child of %s)", value, node.id, side, current_id)
        return node.id


def build_tree(values: Iterable[int]) -> Tree:
    """Build a fresh tree; an empty input gives an empty tree."""
    return TreeBuilder().build(values)
