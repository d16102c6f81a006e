from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Node Style Enum — the two looks a node can have during playback
# ---------------------------------------------------------------------------
class NodeStyle(Enum):
    NEUTRAL    = "neutral"     # default grey
    HIGHLIGHT  = "highlight"   # the node being visited right now


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    One key of the search tree.  Children are referenced by id, never
    derived from the id string.

    Attributes:
        id     : Opaque identifier assigned by the Tree ("n0", "n1", …).
        value  : Integer key.
        left   : Id of the left child, or None.
        right  : Id of the right child, or None.
        parent : Id of the parent, None for the root.
        depth  : Distance from the root (root = 0).
    """

    __slots__ = ("id", "value", "left", "right", "parent", "depth")

    def __init__(
        self,
        node_id: str,
        value: int,
        parent: Optional[str] = None,
        depth: int = 0,
    ):
        self.id: str               = node_id
        self.value: int            = value
        self.left: Optional[str]   = None
        self.right: Optional[str]  = None
        self.parent: Optional[str] = parent
        self.depth: int            = depth

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def child(self, side: str) -> Optional[str]:
        """Child id on `side` ("L" or "R")."""
        if side == "L":
            return self.left
        if side == "R":
            return self.right
        raise ValueError(f"side must be 'L' or 'R', got {side!r}")

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    # ------------------------------------------------------------------
    # Serialisation (web API snapshots only)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "value":  self.value,
            "left":   self.left,
            "right":  self.right,
            "parent": self.parent,
            "depth":  self.depth,
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, value={self.value}, left={self.left}, right={self.right})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.id)
