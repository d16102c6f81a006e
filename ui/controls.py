"""
controls.py — UI Control Panels
===============================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • tree_generator      – "New random tree" button + size/value ranges
  • order_selector      – pre/in/post-order dropdown + Visualize button
  • speed_control       – slider over the configured speed range
  • playback_status     – busy/idle badge, step counter, reset button
  • pseudocode_viewer   – with the order's visit line highlighted
  • sequence_panel      – the values in visit order

Design:
  - All panels are stateless render functions.
  - `disabled=True` greys out every control that starts work; the page
    sets it while an animation is running.
  - Output is raw HTML strings; the main app stitches them together.
"""

from html import escape
from typing import List, Optional

from settings import VisualizerConfig
from traversals import OrderInfo


def _disabled(disabled: bool) -> str:
    return "disabled" if disabled else ""


# ---------------------------------------------------------------------------
# Tree Generator
# ---------------------------------------------------------------------------
def tree_generator(config: VisualizerConfig, disabled: bool = False) -> str:
    return f"""
    <div class="panel tree-generator">
      <h3>🌳 Random Tree</h3>
      <p class="hint">{config.count_min}–{config.count_max} values drawn from
         {config.value_min}–{config.value_max}; duplicates are dropped.</p>
      <button id="btn-new-tree" class="btn-secondary control" {_disabled(disabled)}>New Random Tree</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Order Selector
# ---------------------------------------------------------------------------
def order_selector(
    orders: List[OrderInfo],
    selected_key: str = "pre_order",
    disabled: bool = False,
) -> str:
    options = []
    for info in orders:
        sel = 'selected' if info.key == selected_key else ''
        options.append(f'<option value="{info.key}" {sel}>{escape(info.label)}</option>')

    return f"""
    <div class="panel order-selector">
      <h3>🧭 Traversal</h3>
      <select id="order-selector" class="control" {_disabled(disabled)}>
        {''.join(options)}
      </select>
      <button id="btn-visualize" class="btn-primary control" {_disabled(disabled)}>▶ Visualize</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Speed Control
# ---------------------------------------------------------------------------
def speed_control(config: VisualizerConfig, speed: int, step_delay: int, disabled: bool = False) -> str:
    return f"""
    <div class="panel speed-control">
      <h3>⏱ Speed</h3>
      <input type="range" id="speed-slider" class="control"
             min="{config.min_speed}" max="{config.max_speed}" step="{config.speed_step}"
             value="{speed}" {_disabled(disabled)}>
      <div class="step-info">Speed <span id="speed-val">{speed}</span>
        — <span id="delay-val">{step_delay}</span> ms per node</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Playback Status
# ---------------------------------------------------------------------------
def playback_status(busy: bool = False, steps_fired: int = 0, total_steps: int = 0) -> str:
    badge = (
        '<span class="busy-badge">RUNNING</span>' if busy
        else '<span class="finished-badge">IDLE</span>'
    )
    return f"""
    <div class="panel playback-status">
      <h3>⏯ Playback</h3>
      <div class="step-info">
        Step <span id="current-step">{steps_fired}</span> / <span id="total-steps">{total_steps}</span>
        <span id="status-badge">{badge}</span>
      </div>
      <button id="btn-reset" class="btn-secondary">Reset Styles</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], highlight_line: int = -1) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select a traversal order to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == highlight_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


def visit_line(pseudocode_lines: List[str]) -> int:
    """Index of the `visit(node)` line, -1 if there is none."""
    for i, line in enumerate(pseudocode_lines):
        if "visit(" in line:
            return i
    return -1


# ---------------------------------------------------------------------------
# Sequence Panel
# ---------------------------------------------------------------------------
def sequence_panel(values: Optional[List[int]] = None, label: str = "") -> str:
    if not values:
        return """<div class="explanation-text">▶ Click <strong>Visualize</strong> to walk the tree.</div>"""
    items = ", ".join(str(v) for v in values)
    return f"""<div class="explanation-text"><strong>{escape(label)}</strong>: {items}</div>"""
