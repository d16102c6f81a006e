"""Shared test helpers.

Small checks and renderers that keep the tests readable.
"""

from typing import List, Optional, Tuple

from animation import RecordingRenderer, VirtualClock
from bst import NodeStyle, Tree


SCENARIO_VALUES = [50, 30, 70, 20, 40]


def values_of(tree: Tree, ids: List[str]) -> List[int]:
    return [tree.value_of(nid) for nid in ids]


def subtree_values(tree: Tree, node_id: Optional[str]) -> List[int]:
    if node_id is None:
        return []
    node = tree.nodes[node_id]
    return subtree_values(tree, node.left) + [node.value] + subtree_values(tree, node.right)


def assert_bst(tree: Tree) -> None:
    for node in tree.nodes.values():
        assert all(v < node.value for v in subtree_values(tree, node.left))
        assert all(v > node.value for v in subtree_values(tree, node.right))


class TimedRenderer(RecordingRenderer):
    """Records (time, node_id, style) for every style change."""

    def __init__(self, clock: VirtualClock):
        super().__init__()
        self.clock = clock
        self.timeline: List[Tuple[float, str, NodeStyle]] = []

    def set_node_style(self, node_id: str, style: NodeStyle) -> None:
        super().set_node_style(node_id, style)
        self.timeline.append((self.clock.now(), node_id, style))

    def highlight_times(self) -> List[Tuple[float, str]]:
        return [(t, nid) for t, nid, s in self.timeline if s == NodeStyle.HIGHLIGHT]
