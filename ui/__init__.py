"""
ui/
---
Presentation layer.

    from ui import SvgRenderer
    from ui import tree_generator, order_selector, …
"""

from ui.canvas import SvgRenderer, CanvasConfig

from ui.controls import (
    tree_generator,
    order_selector,
    speed_control,
    playback_status,
    pseudocode_viewer,
    visit_line,
    sequence_panel,
)

__all__ = [
    "SvgRenderer",
    "CanvasConfig",
    "tree_generator",
    "order_selector",
    "speed_control",
    "playback_status",
    "pseudocode_viewer",
    "visit_line",
    "sequence_panel",
]
