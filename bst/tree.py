"""
tree.py — Tree Container
========================
Single source of truth for one built search tree.  The builder is the
only writer; the traversals, the scheduler and the renderer are readers.

Design decisions:
  - Nodes stored in a plain dict keyed by id for O(1) lookup.
  - Ids are opaque and handed out in insertion order, the root is always
    ROOT_ID.  Structure lives in each Node's left/right references.
  - An empty tree (root_id None) is a valid value.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from bst.node import Node


ROOT_ID = "n0"


class Tree:
    """
    Attributes:
        nodes   : {node_id: Node}
        root_id : Id of the root node, None while the tree is empty.
    """

    def __init__(self):
        self.nodes:   Dict[str, Node] = {}
        self.root_id: Optional[str]   = None

    # ==================================================================
    # NODE CREATION (used by the builder)
    # ==================================================================
    def next_id(self) -> str:
        return f"n{len(self.nodes)}"

    def add_root(self, value: int) -> Node:
        if self.root_id is not None:
            raise ValueError("tree already has a root")
        node = Node(ROOT_ID, value)
        self.nodes[node.id] = node
        self.root_id = node.id
        return node

    def add_child(self, parent_id: str, side: str, value: int) -> Node:
        """Create a node and hang it under `parent_id` on `side` ("L"/"R")."""
        parent = self.nodes[parent_id]
        if parent.child(side) is not None:
            raise ValueError(f"{parent_id} already has a child on side {side}")
        node = Node(self.next_id(), value, parent=parent_id, depth=parent.depth + 1)
        self.nodes[node.id] = node
        if side == "L":
            parent.left = node.id
        else:
            parent.right = node.id
        return node

    # ==================================================================
    # QUERIES
    # ==================================================================
    @property
    def root(self) -> Optional[Node]:
        return self.nodes.get(self.root_id) if self.root_id is not None else None

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def child_of(self, node_id: str, side: str) -> Optional[Node]:
        """Resolve the left ("L") or right ("R") child of a node by reference."""
        node = self.nodes.get(node_id)
        if node is None:
            return None
        child_id = node.child(side)
        return self.nodes.get(child_id) if child_id is not None else None

    def edges(self) -> Iterator[Tuple[str, str]]:
        """(parent_id, child_id) for every edge, in insertion order of the child."""
        for node in self.nodes.values():
            if node.parent is not None:
                yield node.parent, node.id

    def values(self) -> List[int]:
        return [n.value for n in self.nodes.values()]

    def value_of(self, node_id: str) -> int:
        return self.nodes[node_id].value

    def contains_value(self, value: int) -> bool:
        """Search from the root following the BST ordering."""
        current = self.root
        while current is not None:
            if value == current.value:
                return True
            next_id = current.left if value < current.value else current.right
            current = self.nodes.get(next_id) if next_id is not None else None
        return False

    def height(self) -> int:
        """Number of levels; 0 for the empty tree."""
        if not self.nodes:
            return 0
        return max(n.depth for n in self.nodes.values()) + 1

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def node_count(self) -> int:
        return len(self.nodes)

    def is_empty(self) -> bool:
        return self.root_id is None

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "root":  self.root_id,
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [list(e) for e in self.edges()],
        }

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"Tree(nodes={self.node_count()}, root={self.root_id}, height={self.height()})"
