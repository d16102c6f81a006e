"""
renderer.py — Renderer Contract
===============================
What the scheduler and the visualizer need from whatever draws the tree.
The drawing itself (layout, colours, SVG, a GUI canvas, …) is up to the
implementation.

RecordingRenderer keeps everything in memory.  Tests read its call log;
the web app uses its `styles` dict as the live view state.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

from bst import NodeStyle


class Renderer(ABC):

    @abstractmethod
    def clear(self) -> None:
        """Remove every visual element."""

    @abstractmethod
    def add_node(self, node_id: str, value: int) -> None:
        """Draw a node labelled with its value."""

    @abstractmethod
    def add_edge(self, parent_id: str, child_id: str) -> None:
        """Draw the edge from a parent to one of its children."""

    @abstractmethod
    def layout(self) -> None:
        """Arrange the current element set."""

    @abstractmethod
    def set_node_style(self, node_id: str, style: NodeStyle) -> None:
        """Apply a visual style to one node."""

    @abstractmethod
    def node_ids(self) -> List[str]:
        """Ids of every drawn node (used by style resets)."""


class RecordingRenderer(Renderer):
    """
    Attributes:
        nodes  : {node_id: value} currently drawn.
        edges  : [(parent_id, child_id)] currently drawn.
        styles : {node_id: NodeStyle} current style of each node.
        calls  : Every call made, as (method_name, *args) tuples.
    """

    def __init__(self):
        self.nodes:  Dict[str, int]            = {}
        self.edges:  List[Tuple[str, str]]     = []
        self.styles: Dict[str, NodeStyle]      = {}
        self.calls:  List[tuple]               = []

    def clear(self) -> None:
        self.calls.append(("clear",))
        self.nodes.clear()
        self.edges.clear()
        self.styles.clear()

    def add_node(self, node_id: str, value: int) -> None:
        self.calls.append(("add_node", node_id, value))
        self.nodes[node_id] = value
        self.styles[node_id] = NodeStyle.NEUTRAL

    def add_edge(self, parent_id: str, child_id: str) -> None:
        self.calls.append(("add_edge", parent_id, child_id))
        self.edges.append((parent_id, child_id))

    def layout(self) -> None:
        self.calls.append(("layout",))

    def set_node_style(self, node_id: str, style: NodeStyle) -> None:
        self.calls.append(("set_node_style", node_id, style))
        self.styles[node_id] = style

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    def highlighted(self) -> List[str]:
        return [nid for nid, s in self.styles.items() if s == NodeStyle.HIGHLIGHT]

    def style_calls(self) -> List[tuple]:
        return [c for c in self.calls if c[0] == "set_node_style"]
