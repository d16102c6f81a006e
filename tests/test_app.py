import logging
import random

import pytest

from animation import VirtualClock
from main import create_app


@pytest.fixture
def clock():
    return VirtualClock()


@pytest.fixture
def app(clock):
    return create_app({"TESTING": True, "COUNT_MIN": 5, "COUNT_MAX": 8}, clock=clock, rng=random.Random(1))


@pytest.fixture
def client(app):
    return app.test_client()


class TestIndex:

    def test_page_renders(self, client):
        res = client.get("/")
        assert res.status_code == 200
        body = res.get_data(as_text=True)
        assert "<svg" in body
        assert "order-selector" in body
        assert "speed-slider" in body

    def test_initial_tree_uses_config(self, app):
        tree = app.extensions["visualizer"].tree
        assert 1 <= tree.node_count() <= 8


class TestGenerate:

    def test_from_values(self, client):
        res = client.post("/api/tree/generate", json={"values": [10, 5, 10]})
        assert res.status_code == 200
        data = res.get_json()
        assert len(data["tree"]["nodes"]) == 2
        assert data["busy"] is False

    def test_random(self, client):
        res = client.post("/api/tree/generate", json={})
        assert res.status_code == 200
        assert 1 <= len(res.get_json()["tree"]["nodes"]) <= 8

    def test_bad_values(self, client):
        res = client.post("/api/tree/generate", json={"values": ["a"]})
        assert res.status_code == 400
        assert "error" in res.get_json()

    def test_accepts_up_to_count_max(self, client):
        res = client.post("/api/tree/generate", json={"values": list(range(8))})
        assert res.status_code == 200
        assert len(res.get_json()["tree"]["nodes"]) == 8

    def test_rejects_more_than_count_max(self, client, app):
        res = client.post("/api/tree/generate", json={"values": list(range(1500))})
        assert res.status_code == 400
        assert "error" in res.get_json()
        assert app.extensions["visualizer"].tree.node_count() <= 8


class TestTraverse:

    def test_scenario(self, client):
        client.post("/api/tree/generate", json={"values": [50, 30, 70, 20, 40]})
        res = client.post("/api/traverse", json={"order": "post_order", "speed": 500})
        assert res.status_code == 200
        data = res.get_json()
        assert data["values"] == [20, 40, 30, 70, 50]
        assert data["step_delay"] == 600
        assert data["total_duration"] == 2400
        assert data["busy"] is True

    def test_unknown_order(self, client):
        res = client.post("/api/traverse", json={"order": "zigzag"})
        assert res.status_code == 400

    def test_bad_speed(self, client):
        res = client.post("/api/traverse", json={"order": "in_order", "speed": "fast"})
        assert res.status_code == 400

    def test_busy_conflicts(self, client, clock):
        client.post("/api/tree/generate", json={"values": [2, 1, 3]})
        assert client.post("/api/traverse", json={"order": "in_order"}).status_code == 200
        assert client.post("/api/traverse", json={"order": "in_order"}).status_code == 409
        assert client.post("/api/tree/generate", json={}).status_code == 409

        clock.run_all()
        assert client.post("/api/tree/generate", json={}).status_code == 200


class TestStateAndReset:

    def test_state_follows_clock(self, client, clock):
        client.post("/api/tree/generate", json={"values": [2, 1, 3]})
        client.post("/api/traverse", json={"order": "in_order", "speed": 1000})

        clock.advance(100)
        data = client.get("/api/state").get_json()
        assert data["busy"] is True
        assert data["steps_fired"] == 2

        clock.advance(100)
        data = client.get("/api/state").get_json()
        assert data["busy"] is False
        assert data["highlighted"] is not None
        assert "highlight" in data["svg"]

    def test_reset(self, client, clock):
        client.post("/api/tree/generate", json={"values": [2, 1, 3]})
        client.post("/api/traverse", json={"order": "in_order"})
        clock.run_all()
        res = client.post("/api/styles/reset")
        assert res.status_code == 200
        assert 'class="node highlight"' not in res.get_json()["svg"]


class TestLogging:

    @pytest.fixture(autouse=True)
    def restore_levels(self):
        yield
        for name in ("bst", "traversals", "animation", "ui"):
            logging.getLogger(name).setLevel(logging.NOTSET)

    def test_level_applies_to_startup(self, caplog):
        with caplog.at_level(logging.DEBUG):
            app = create_app({"TESTING": True, "LOG_LEVEL": "warning"}, clock=VirtualClock())
        assert logging.getLogger("bst").level == logging.WARNING
        assert app.logger.level == logging.WARNING
        assert not [r for r in caplog.records if r.name.startswith("bst")]

    def test_default_level_logs_initial_tree(self, caplog):
        with caplog.at_level(logging.DEBUG):
            create_app({"TESTING": True}, clock=VirtualClock(), rng=random.Random(3))
        assert any(r.name == "bst.builder" and r.levelno == logging.INFO for r in caplog.records)
