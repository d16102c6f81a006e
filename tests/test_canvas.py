from bst import NodeStyle, build_tree
from ui import SvgRenderer, pseudocode_viewer, visit_line
from traversals import get_order

from .helpers import SCENARIO_VALUES


def draw(values):
    tree = build_tree(values)
    renderer = SvgRenderer()
    for node in tree.nodes.values():
        renderer.add_node(node.id, node.value)
    for parent_id, child_id in tree.edges():
        renderer.add_edge(parent_id, child_id)
    renderer.layout()
    return tree, renderer


class TestLayout:

    def test_left_to_right_in_value_order(self):
        tree, renderer = draw(SCENARIO_VALUES)
        by_x = sorted(renderer.positions, key=lambda nid: renderer.positions[nid][0])
        assert [tree.value_of(nid) for nid in by_x] == [20, 30, 40, 50, 70]

    def test_rows_follow_depth(self):
        tree, renderer = draw(SCENARIO_VALUES)
        ys = {tree.value_of(nid): pos[1] for nid, pos in renderer.positions.items()}
        assert ys[50] < ys[30] == ys[70] < ys[20] == ys[40]

    def test_single_node_centered(self):
        _, renderer = draw([5])
        (x, _), = renderer.positions.values()
        assert x == renderer.config.width / 2


class TestSvg:

    def test_contains_every_node_and_edge(self):
        tree, renderer = draw(SCENARIO_VALUES)
        svg = renderer.to_svg()
        assert svg.startswith("<svg")
        assert svg.count('class="node') == 5
        assert svg.count('class="edge"') == 4

    def test_highlight_changes_fill(self):
        tree, renderer = draw(SCENARIO_VALUES)
        renderer.set_node_style(tree.root_id, NodeStyle.HIGHLIGHT)
        svg = renderer.to_svg()
        assert 'class="node highlight"' in svg
        assert renderer.config.node_colors["highlight"] in svg

    def test_clear(self):
        _, renderer = draw(SCENARIO_VALUES)
        renderer.clear()
        assert renderer.node_ids() == []
        assert 'class="node' not in renderer.to_svg()

    def test_unknown_node_style_ignored(self):
        _, renderer = draw([1])
        renderer.set_node_style("n99", NodeStyle.HIGHLIGHT)
        assert "n99" not in renderer.styles


class TestPseudocode:

    def test_visit_line_highlighted(self):
        lines = get_order("in_order").pseudocode
        html = pseudocode_viewer(lines, visit_line(lines))
        assert html.count("code-line highlight") == 1
        assert visit_line(lines) == 3
