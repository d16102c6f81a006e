"""
bst/
----
Core data layer.  Public API:

    from bst import Tree, Node, NodeStyle
    from bst import build_tree, generate_values
"""

from bst.node    import Node, NodeStyle
from bst.tree    import Tree, ROOT_ID
from bst.builder import TreeBuilder, build_tree
from bst.values  import generate_values

__all__ = [
    "Node",        "NodeStyle",
    "Tree",        "ROOT_ID",
    "TreeBuilder", "build_tree",
    "generate_values",
]
