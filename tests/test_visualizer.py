import random

import pytest

from animation import RecordingRenderer, VirtualClock, Visualizer
from bst import NodeStyle
from settings import SPEED_PRESETS, VisualizerConfig

from .helpers import SCENARIO_VALUES, assert_bst, values_of


@pytest.fixture
def clock():
    return VirtualClock()


@pytest.fixture
def vis(clock):
    return Visualizer(renderer=RecordingRenderer(), clock=clock, rng=random.Random(11))


class TestNewTree:

    def test_draws_nodes_then_edges_then_layout(self, vis):
        vis.new_tree(SCENARIO_VALUES)
        names = [c[0] for c in vis.renderer.calls]
        assert names[0] == "clear"
        assert names[1:6] == ["add_node"] * 5
        assert names[6:10] == ["add_edge"] * 4
        assert names[-1] == "layout"
        assert sorted(vis.renderer.nodes.values()) == [20, 30, 40, 50, 70]

    def test_random_tree_respects_config(self, vis):
        tree = vis.new_tree()
        assert 1 <= tree.node_count() <= 100
        assert all(1 <= v <= 100 for v in tree.values())
        assert_bst(tree)

    def test_replaces_previous_tree(self, vis):
        first = vis.new_tree([1, 2, 3])
        second = vis.new_tree([9])
        assert vis.tree is second
        assert first is not second
        assert list(vis.renderer.nodes.values()) == [9]

    def test_seeded_visualizers_agree(self):
        a = Visualizer(clock=VirtualClock(), rng=random.Random(5)).new_tree()
        b = Visualizer(clock=VirtualClock(), rng=random.Random(5)).new_tree()
        assert a.values() == b.values()


class TestVisualize:

    def test_returns_sequence_and_animates(self, vis, clock):
        vis.new_tree(SCENARIO_VALUES)
        ids = vis.visualize("in_order", 500)
        assert values_of(vis.tree, ids) == [20, 30, 40, 50, 70]
        assert vis.step_delay == 600
        assert vis.busy

        clock.advance(600 * 4)
        assert not vis.busy
        assert vis.highlighted == ids[-1]
        assert vis.renderer.highlighted() == [ids[-1]]

    def test_speed_is_clamped(self, vis):
        vis.new_tree(SCENARIO_VALUES)
        vis.visualize("pre_order", 10_000)
        assert vis.speed == 1000
        assert vis.step_delay == 100

    def test_defaults(self, vis):
        vis.new_tree(SCENARIO_VALUES)
        ids = vis.visualize()
        assert vis.order == "pre_order"
        assert vis.speed == SPEED_PRESETS["medium"]
        assert values_of(vis.tree, ids) == [50, 30, 20, 40, 70]

    def test_resets_styles_before_starting(self, vis, clock):
        vis.new_tree(SCENARIO_VALUES)
        vis.visualize("pre_order", 1000)
        clock.run_all()
        last = vis.highlighted
        vis.visualize("post_order", 1000)
        assert vis.renderer.styles[last] == NodeStyle.NEUTRAL

    def test_unknown_order(self, vis):
        vis.new_tree(SCENARIO_VALUES)
        with pytest.raises(ValueError):
            vis.visualize("zigzag", 500)
        assert not vis.busy

    def test_empty_tree_finishes_immediately(self, vis):
        vis.new_tree([])
        assert vis.visualize("in_order", 500) == []
        assert not vis.busy


class TestBusyGating:

    def test_requests_rejected_while_running(self, vis, clock):
        vis.new_tree(SCENARIO_VALUES)
        tree = vis.tree
        vis.visualize("pre_order", 500)

        assert vis.new_tree() is None
        assert vis.visualize("in_order", 500) is None
        assert vis.tree is tree
        assert vis.order == "pre_order"

        clock.run_all()
        assert vis.new_tree([3]) is not None

    def test_reset_allowed_while_running(self, vis, clock):
        vis.new_tree(SCENARIO_VALUES)
        vis.visualize("pre_order", 500)
        clock.advance(0)
        vis.reset_styles()
        assert vis.renderer.highlighted() == []
        assert vis.busy

    def test_on_busy_callback(self, clock):
        signals = []
        vis = Visualizer(clock=clock, on_busy=signals.append)
        vis.new_tree([2, 1])
        vis.visualize("in_order", 1000)
        clock.run_all()
        assert signals == [True, False]


class TestSnapshotAndPlan:

    def test_snapshot(self, vis, clock):
        vis.new_tree(SCENARIO_VALUES)
        vis.visualize("post_order", 500)
        clock.advance(600)
        snap = vis.snapshot()
        assert snap["busy"] is True
        assert snap["steps_fired"] == 2
        assert snap["total_steps"] == 5
        assert snap["tree"]["root"] == vis.tree.root_id

    def test_plan(self, vis):
        vis.new_tree(SCENARIO_VALUES)
        ids = vis.visualize("pre_order", 500)
        plan = vis.plan(ids)
        assert plan["values"] == [50, 30, 20, 40, 70]
        assert plan["total_duration"] == 2400
        assert [s["at"] for s in plan["schedule"]] == [0, 600, 1200, 1800, 2400]


class TestConfig:

    def test_defaults(self):
        cfg = VisualizerConfig()
        assert (cfg.count_min, cfg.count_max) == (10, 100)
        assert (cfg.min_speed, cfg.max_speed, cfg.speed_step) == (100, 1000, 100)

    def test_from_mapping_upper_case(self):
        cfg = VisualizerConfig.from_mapping({"COUNT_MAX": "20", "LOG_LEVEL": "DEBUG", "OTHER": 1})
        assert cfg.count_max == 20
        assert cfg.log_level == "DEBUG"

    @pytest.mark.parametrize("kwargs", [
        {"count_min": 0},
        {"count_min": 50, "count_max": 10},
        {"value_min": 10, "value_max": 1},
        {"min_speed": 0},
        {"speed_step": 0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            VisualizerConfig(**kwargs)
