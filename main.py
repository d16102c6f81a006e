"""
main.py — BST Traversal Visualizer Flask App
============================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  POST /api/tree/generate      – build a new random tree (or from "values")
  POST /api/styles/reset       – every node back to neutral
  POST /api/traverse           – start animating {order, speed}
  GET  /api/state              – advance the animation clock, current state

State management:
  One Visualizer per app, kept in `app.extensions["visualizer"]`
  (in-memory, single user).  Animation steps are timer-deferred on a
  MonotonicClock; every /api/state poll ticks it, so the page polls
  while the status is "busy" and re-enables its controls afterwards.

Configuration:
  Defaults come from settings.VisualizerConfig.  Any field can be
  overridden with a BSTVIS_* environment variable (BSTVIS_COUNT_MAX=30)
  or through the mapping passed to create_app().  LOG_LEVEL is applied
  before the first tree is built.
"""

import logging
import os
import random
import sys
from typing import Any, Mapping, Optional

from flask import Flask, current_app, jsonify, render_template_string, request

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from settings import VisualizerConfig
from traversals import get_order, list_orders
from animation import Clock, Visualizer
from ui import (
    SvgRenderer,
    tree_generator,
    order_selector,
    speed_control,
    playback_status,
    pseudocode_viewer,
    visit_line,
    sequence_panel,
)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(
    overrides: Optional[Mapping[str, Any]] = None,
    clock: Optional[Clock] = None,
    rng: Optional[random.Random] = None,
) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping({k.upper(): v for k, v in VisualizerConfig().to_dict().items()})
    app.config.from_prefixed_env("BSTVIS")
    if overrides:
        app.config.from_mapping(overrides)

    config = VisualizerConfig.from_mapping(app.config)
    configure_logging(app, config.log_level)
    visualizer = Visualizer(config=config, renderer=SvgRenderer(), clock=clock, rng=rng)
    visualizer.new_tree()
    app.extensions["visualizer"] = visualizer
    app.logger.info("Visualizer ready: %r", visualizer.tree)

    register_routes(app)
    return app


# package loggers that follow LOG_LEVEL
LOGGERS = ("bst", "traversals", "animation", "ui")


def configure_logging(app: Flask, level: str) -> None:
    level = level.upper()
    logging.basicConfig(level=level)
    app.logger.setLevel(level)
    for name in LOGGERS:
        logging.getLogger(name).setLevel(level)


def get_visualizer() -> Visualizer:
    return current_app.extensions["visualizer"]


def error(message: str, status: int = 400, **extra):
    return jsonify({"error": message, **extra}), status


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def register_routes(app: Flask) -> None:

    @app.route("/")
    def index():
        vis = get_visualizer()
        vis.tick()
        info = get_order(vis.order)
        busy = vis.busy
        snap = vis.snapshot()

        return render_template_string(INDEX_TEMPLATE,
            svg=vis.renderer.to_svg(),
            tree_gen=tree_generator(vis.config, disabled=busy),
            selector=order_selector(list_orders(), vis.order, disabled=busy),
            speed=speed_control(vis.config, vis.speed, vis.step_delay, disabled=busy),
            status=playback_status(busy, snap["steps_fired"], snap["total_steps"]),
            pseudocode=pseudocode_viewer(info.pseudocode, visit_line(info.pseudocode)),
            sequence=sequence_panel(),
        )

    # -----------------------------------------------------------------------
    # API: Tree Generation
    # -----------------------------------------------------------------------
    @app.route("/api/tree/generate", methods=["POST"])
    def api_tree_generate():
        vis = get_visualizer()
        data = request.get_json(silent=True) or {}
        values = data.get("values")

        if values is not None:
            if not isinstance(values, list) or not all(
                isinstance(v, int) and not isinstance(v, bool) for v in values
            ):
                return error("values must be a list of integers")
            if len(values) > vis.config.count_max:
                return error(f"at most {vis.config.count_max} values allowed")

        vis.tick()
        tree = vis.new_tree(values)
        if tree is None:
            return error("Animation running", 409, busy=True)

        current_app.logger.info("New tree: %d node(s)", tree.node_count())
        return jsonify({
            "svg":  vis.renderer.to_svg(),
            "tree": tree.to_dict(),
            "busy": vis.busy,
        })

    # -----------------------------------------------------------------------
    # API: Reset
    # -----------------------------------------------------------------------
    @app.route("/api/styles/reset", methods=["POST"])
    def api_styles_reset():
        vis = get_visualizer()
        vis.reset_styles()
        return jsonify({"svg": vis.renderer.to_svg(), "busy": vis.busy})

    # -----------------------------------------------------------------------
    # API: Traverse
    # -----------------------------------------------------------------------
    @app.route("/api/traverse", methods=["POST"])
    def api_traverse():
        vis = get_visualizer()
        data = request.get_json(silent=True) or {}
        order = data.get("order", vis.config.default_order)
        speed = data.get("speed", vis.speed)

        if not isinstance(order, str):
            return error("order must be a string")
        if isinstance(speed, bool) or not isinstance(speed, (int, float)):
            return error("speed must be a number")

        vis.tick()
        try:
            sequence = vis.visualize(order, speed)
        except ValueError as e:
            return error(str(e))
        if sequence is None:
            return error("Animation running", 409, busy=True)

        info = get_order(order)
        plan = vis.plan(sequence)
        current_app.logger.info(
            "Traversing %s: %d node(s), %s ms per step", info.key, len(sequence), plan["step_delay"],
        )
        return jsonify({
            **plan,
            "order":      info.key,
            "speed":      vis.speed,
            "busy":       vis.busy,
            "svg":        vis.renderer.to_svg(),
            "pseudocode": pseudocode_viewer(info.pseudocode, visit_line(info.pseudocode)),
            "explanation": sequence_panel(plan["values"], info.label),
        })

    # -----------------------------------------------------------------------
    # API: State (polled while busy)
    # -----------------------------------------------------------------------
    @app.route("/api/state")
    def api_state():
        vis = get_visualizer()
        vis.tick()
        snap = vis.snapshot()
        return jsonify({
            **snap,
            "svg":    vis.renderer.to_svg(),
            "status": playback_status(snap["busy"], snap["steps_fired"], snap["total_steps"]),
        })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>BST Traversal Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 320px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      min-height: 220px;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      margin-top: 8px;
    }

    button:disabled, select:disabled, input:disabled { opacity: 0.4; cursor: not-allowed; }

    .btn-primary { background: linear-gradient(135deg, var(--accent-emerald), #059669); }
    .btn-secondary { background: var(--bg-panel); border: 1px solid var(--border); }

    select, input[type="range"] { width: 100%; margin: 6px 0; }

    .step-info {
      font-size: 13px;
      margin: 10px 0;
      color: var(--text-secondary);
      font-family: 'JetBrains Mono', monospace;
    }

    .finished-badge, .busy-badge {
      color: #fff;
      padding: 4px 10px;
      border-radius: 6px;
      font-size: 11px;
      font-weight: 700;
    }
    .finished-badge { background: var(--accent-emerald); }
    .busy-badge { background: var(--accent-amber); }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 16px;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 13px;
    }
    .code-line { padding: 4px 12px; border-radius: 6px; }
    .code-line.highlight {
      background: rgba(6, 182, 212, 0.15);
      border-left: 3px solid var(--accent-cyan);
    }

    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .explanation-text strong { color: var(--text-primary); }
    .hint { font-size: 11px; color: var(--text-secondary); font-style: italic; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="tree-gen">{{ tree_gen|safe }}</div>
    <div id="selector">{{ selector|safe }}</div>
    <div id="speed">{{ speed|safe }}</div>
    <div id="status">{{ status|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>
    <div id="bottom-panel">
      <div>
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div>
        <h3>Visit Order</h3>
        <div id="explanation">{{ sequence|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data),
      });
      return await res.json();
    }

    function setControlsDisabled(disabled) {
      document.querySelectorAll('.control').forEach(el => el.disabled = disabled);
    }

    async function poll() {
      const res = await fetch('/api/state');
      const data = await res.json();
      document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('status').innerHTML = data.status;
      bindReset();
      if (data.busy) {
        setTimeout(poll, 50);
      } else {
        setControlsDisabled(false);
      }
    }

    function bindReset() {
      document.getElementById('btn-reset')?.addEventListener('click', async () => {
        const data = await post('/api/styles/reset', {});
        if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      });
    }
    bindReset();

    document.getElementById('btn-new-tree')?.addEventListener('click', async () => {
      const data = await post('/api/tree/generate', {});
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
    });

    document.getElementById('speed-slider')?.addEventListener('input', (e) => {
      const s = +e.target.value;
      const min = +e.target.min, max = +e.target.max;
      document.getElementById('speed-val').textContent = s;
      document.getElementById('delay-val').textContent = max + min - s;
    });

    document.getElementById('btn-visualize')?.addEventListener('click', async () => {
      const data = await post('/api/traverse', {
        order: document.getElementById('order-selector').value,
        speed: +document.getElementById('speed-slider').value,
      });
      if (data.error) return;
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.explanation) document.getElementById('explanation').innerHTML = data.explanation;
      setControlsDisabled(true);
      poll();
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app = create_app()
    print("=" * 60)
    print("  BST Traversal Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    # one in-process Visualizer: serve requests one at a time
    app.run(debug=False, threaded=False)
