"""
traversals/__init__.py — Traversal Registry
===========================================
Single source of truth for every traversal order the visualizer knows.

    from traversals import TraversalOrder, traverse, get_order

REGISTRY is a dict keyed by the order's string key:
    {
        "pre_order": OrderInfo(key, label, fn, pseudocode, description),
        …
    }

`traverse(tree, order)` accepts either a TraversalOrder member or its key
and always returns a fresh list of node ids.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from bst import Tree

# ---------------------------------------------------------------------------
# Import all traversal modules
# ---------------------------------------------------------------------------
from traversals.pre_order  import pre_order  as _pre,  PSEUDOCODE as _pre_pc
from traversals.in_order   import in_order   as _in,   PSEUDOCODE as _in_pc
from traversals.post_order import post_order as _post, PSEUDOCODE as _post_pc


class TraversalOrder(Enum):
    PRE_ORDER  = "pre_order"
    IN_ORDER   = "in_order"
    POST_ORDER = "post_order"


# ---------------------------------------------------------------------------
# OrderInfo — metadata card for each order
# ---------------------------------------------------------------------------
@dataclass
class OrderInfo:
    key:          str                           # registry key, e.g. "in_order"
    label:        str                           # human label, e.g. "In-order"
    fn:           Callable[[Tree], List[str]]   # tree → ordered node ids
    pseudocode:   List[str]                     # lines for the side-panel
    description:  str = ""                      # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, OrderInfo] = {

    "pre_order": OrderInfo(
        key="pre_order", label="Pre-order", fn=_pre, pseudocode=_pre_pc,
        description="Node, then left subtree, then right subtree. Root comes first.",
    ),

    "in_order": OrderInfo(
        key="in_order", label="In-order", fn=_in, pseudocode=_in_pc,
        description="Left subtree, node, right subtree. Reads the values in ascending order.",
    ),

    "post_order": OrderInfo(
        key="post_order", label="Post-order", fn=_post, pseudocode=_post_pc,
        description="Left subtree, right subtree, then node. Root comes last.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_order(key: Union[str, TraversalOrder]) -> Optional[OrderInfo]:
    """Return OrderInfo by key or enum member, or None."""
    if isinstance(key, TraversalOrder):
        key = key.value
    return REGISTRY.get(key)


def list_orders() -> List[OrderInfo]:
    """Return all registered orders in insertion order."""
    return list(REGISTRY.values())


def traverse(tree: Tree, order: Union[str, TraversalOrder]) -> List[str]:
    """Node ids of `tree` in the requested order.  Empty tree → []."""
    info = get_order(order)
    if info is None:
        raise ValueError(f"Unknown traversal order: {order}")
    return info.fn(tree)


__all__ = [
    "TraversalOrder",
    "OrderInfo",
    "REGISTRY",
    "get_order",
    "list_orders",
    "traverse",
]
