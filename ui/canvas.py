"""
canvas.py — SVG Tree Renderer
=============================
A Renderer that keeps the drawn elements in memory and turns them into
an SVG string on demand.

    renderer = SvgRenderer()
    visualizer = Visualizer(renderer=renderer)
    visualizer.new_tree()
    svg = renderer.to_svg()

Layout:
  - x comes from the node's rank in an in-order walk of the drawn edges,
    so a search tree reads left-to-right in ascending order.
  - y comes from the node's depth.
  - Positions are recomputed on every layout(); they are a convenience,
    not a contract.

Style-based colouring is a simple dict lookup: NodeStyle → hex color.
"""

from typing import Dict, List, Optional, Tuple

from bst import NodeStyle
from animation.renderer import Renderer


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 600
    bg:     str = "#0d1117"
    padding: int = 40

    # node colors (style → fill)
    node_colors: Dict[str, str] = {
        "neutral":    "#1c2128",   # dark grey
        "highlight":  "#06b6d4",   # teal
    }

    # node
    node_radius:        int = 18
    node_stroke:        str = "#30363d"
    node_stroke_width:  int = 2
    node_label_color:   str = "#e6edf3"
    node_label_size:    int = 12
    node_label_weight:  str = "600"

    # edge
    edge_color:         str = "#30363d"
    edge_width:         int = 2


CONFIG = CanvasConfig()


class SvgRenderer(Renderer):
    """
    Attributes:
        config    : Visual config.
        nodes     : {node_id: value}
        edges     : [(parent_id, child_id)]
        styles    : {node_id: NodeStyle}
        positions : {node_id: (x, y)} from the last layout().
    """

    def __init__(self, config: CanvasConfig = CONFIG):
        self.config = config
        self.nodes:     Dict[str, int]                  = {}
        self.edges:     List[Tuple[str, str]]           = []
        self.styles:    Dict[str, NodeStyle]            = {}
        self.positions: Dict[str, Tuple[float, float]]  = {}

    # ------------------------------------------------------------------
    # Renderer contract
    # ------------------------------------------------------------------
    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()
        self.styles.clear()
        self.positions.clear()

    def add_node(self, node_id: str, value: int) -> None:
        self.nodes[node_id] = value
        self.styles[node_id] = NodeStyle.NEUTRAL

    def add_edge(self, parent_id: str, child_id: str) -> None:
        self.edges.append((parent_id, child_id))

    def layout(self) -> None:
        self.positions = _layered_layout(self.nodes, self.edges, self.config)

    def set_node_style(self, node_id: str, style: NodeStyle) -> None:
        if node_id in self.nodes:
            self.styles[node_id] = style

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def to_svg(self) -> str:
        config = self.config
        if self.nodes and not self.positions:
            self.layout()

        svg_parts = [
            f'<svg width="{config.width}" height="{config.height}" '
            f'viewBox="0 0 {config.width} {config.height}" '
            f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
            f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
        ]

        # -- edges (draw first so nodes sit on top) --
        for parent_id, child_id in self.edges:
            svg_parts.append(self._render_edge(parent_id, child_id))

        # -- nodes --
        for node_id in self.nodes:
            svg_parts.append(self._render_node(node_id))

        svg_parts.append("</svg>")
        return "\n".join(p for p in svg_parts if p)

    def _render_node(self, node_id: str) -> str:
        config = self.config
        if node_id not in self.positions:
            return ""
        cx, cy = self.positions[node_id]
        style = self.styles.get(node_id, NodeStyle.NEUTRAL)
        fill = config.node_colors.get(style.value, config.node_colors["neutral"])

        stroke = config.node_stroke
        stroke_width = config.node_stroke_width
        glow = ""
        if style == NodeStyle.HIGHLIGHT:
            stroke = config.node_colors["highlight"]
            stroke_width = 3
            glow = (
                f'  <circle cx="{cx}" cy="{cy}" r="{config.node_radius + 8}" fill="none" '
                f'stroke="{config.node_colors["highlight"]}" stroke-width="2" opacity="0.3"/>'
            )

        parts = [
            f'<g class="node {style.value}" data-id="{node_id}">',
            glow,
            f'  <circle cx="{cx}" cy="{cy}" r="{config.node_radius}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>',
            f'  <text x="{cx}" y="{cy + 4}" text-anchor="middle" '
            f'font-size="{config.node_label_size}" font-family="\'DM Sans\', sans-serif" '
            f'fill="{config.node_label_color}" font-weight="{config.node_label_weight}">{self.nodes[node_id]}</text>',
            '</g>',
        ]
        return "\n".join(p for p in parts if p)

    def _render_edge(self, parent_id: str, child_id: str) -> str:
        if parent_id not in self.positions or child_id not in self.positions:
            return ""
        x1, y1 = self.positions[parent_id]
        x2, y2 = self.positions[child_id]
        return (
            f'<line class="edge" data-source="{parent_id}" data-target="{child_id}" '
            f'x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
            f'stroke="{self.config.edge_color}" stroke-width="{self.config.edge_width}"/>'
        )


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
def _layered_layout(
    nodes: Dict[str, int],
    edges: List[Tuple[str, str]],
    config: CanvasConfig,
) -> Dict[str, Tuple[float, float]]:
    if not nodes:
        return {}

    # rebuild left/right children from the drawn edges: a child whose value
    # is below its parent's sits on the left
    children: Dict[str, List[Optional[str]]] = {nid: [None, None] for nid in nodes}
    has_parent = set()
    for parent_id, child_id in edges:
        if parent_id not in nodes or child_id not in nodes:
            continue
        side = 0 if nodes[child_id] < nodes[parent_id] else 1
        children[parent_id][side] = child_id
        has_parent.add(child_id)

    roots = [nid for nid in nodes if nid not in has_parent]
    rank: Dict[str, int] = {}
    depth: Dict[str, int] = {}

    def walk(node_id: Optional[str], level: int) -> None:
        if node_id is None:
            return
        left, right = children[node_id]
        walk(left, level + 1)
        rank[node_id] = len(rank)
        depth[node_id] = level
        walk(right, level + 1)

    for root in roots:
        walk(root, 0)

    columns = max(len(rank) - 1, 1)
    rows = max(max(depth.values()), 1)
    usable_w = config.width - 2 * config.padding
    usable_h = config.height - 2 * config.padding

    positions: Dict[str, Tuple[float, float]] = {}
    for node_id in nodes:
        if len(rank) == 1:
            x = config.width / 2
        else:
            x = config.padding + rank[node_id] * usable_w / columns
        y = config.padding + depth[node_id] * usable_h / rows
        positions[node_id] = (round(x, 2), round(y, 2))
    return positions
