"""
visualizer.py — Caller-Facing Facade
====================================
The ONLY object the UI talks to.  It owns the current tree, the renderer
and the scheduler, and turns UI requests into core calls:

    new_tree()        values → build → clear/add/layout on the renderer
    reset_styles()    every node back to neutral
    visualize()       traverse → animate at the speed's effective delay

While an animation runs, new_tree() and visualize() are refused and
`busy` stays True; that is the "controls disabled" signal for the UI.
"""

import logging
import random
from typing import Callable, Dict, List, Optional, Sequence, Union

from bst import Tree, build_tree, generate_values
from traversals import TraversalOrder, get_order, traverse
from settings import VisualizerConfig
from animation.clock import Clock, MonotonicClock
from animation.renderer import Renderer, RecordingRenderer
from animation.schedule import build_schedule, clamp_speed, effective_delay, total_duration
from animation.scheduler import AnimationScheduler


logger = logging.getLogger(__name__)


class Visualizer:
    """
    Attributes:
        config    : VisualizerConfig (ranges and speed slider).
        renderer  : Renderer the tree is drawn on.
        clock     : Clock driving the scheduler.
        scheduler : AnimationScheduler.
        tree      : Current Tree (replaced wholesale by new_tree()).
        order     : Key of the order last visualized.
        speed     : Speed last used (clamped).
    """

    def __init__(
        self,
        config: Optional[VisualizerConfig] = None,
        renderer: Optional[Renderer] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
        on_busy: Optional[Callable[[bool], None]] = None,
    ):
        self.config = config or VisualizerConfig()
        self.renderer = renderer or RecordingRenderer()
        self.clock = clock or MonotonicClock()
        self.rng = rng or random.Random()
        self.scheduler = AnimationScheduler(self.renderer, self.clock, on_busy=on_busy)
        self.tree: Tree = Tree()
        self.order: str = self.config.default_order
        self.speed: int = self.config.default_speed

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------
    def new_tree(self, values: Optional[Sequence[int]] = None) -> Optional[Tree]:
        """Build and draw a fresh tree.  None if an animation is running."""
        if self.busy:
            logger.warning("New tree requested while animating; request ignored")
            return None

        if values is None:
            cfg = self.config
            values = generate_values(cfg.count_min, cfg.count_max, cfg.value_min, cfg.value_max, rng=self.rng)
        self.tree = build_tree(values)
        self._draw()
        return self.tree

    def reset_styles(self) -> None:
        self.scheduler.reset_styles(self.tree.node_ids())

    def visualize(
        self,
        order: Union[str, TraversalOrder, None] = None,
        speed: Optional[float] = None,
    ) -> Optional[List[str]]:
        """
        Start animating `order` at `speed`.  Returns the visit sequence, or
        None if an animation is already running.  Unknown order → ValueError.
        """
        if self.busy:
            logger.warning("Traversal requested while animating; request ignored")
            return None

        info = get_order(order if order is not None else self.config.default_order)
        if info is None:
            raise ValueError(f"Unknown traversal order: {order}")

        self.order = info.key
        self.speed = self.clamped_speed(speed if speed is not None else self.speed)
        sequence = traverse(self.tree, info.key)

        self.reset_styles()
        self.scheduler.animate(sequence, self.step_delay)
        return sequence

    def tick(self) -> int:
        """Fire due animation steps (wall-clock mode)."""
        if isinstance(self.clock, MonotonicClock):
            return self.clock.tick()
        return 0

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def clamped_speed(self, speed: float) -> int:
        cfg = self.config
        return clamp_speed(speed, cfg.min_speed, cfg.max_speed, cfg.speed_step)

    @property
    def step_delay(self) -> int:
        return self._delay_for(self.speed)

    def _delay_for(self, speed: float) -> int:
        cfg = self.config
        return effective_delay(speed, cfg.min_speed, cfg.max_speed, cfg.speed_step)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def busy(self) -> bool:
        return self.scheduler.is_running

    @property
    def highlighted(self) -> Optional[str]:
        return self.scheduler.highlighted

    def values_by_id(self) -> Dict[str, int]:
        return {nid: n.value for nid, n in self.tree.nodes.items()}

    def snapshot(self) -> dict:
        """JSON-safe state for the web API."""
        run = self.scheduler.run
        return {
            "busy":        self.busy,
            "highlighted": self.highlighted,
            "order":       self.order,
            "speed":       self.speed,
            "step_delay":  self.step_delay,
            "steps_fired": run.fired if run else 0,
            "total_steps": len(run.sequence) if run else 0,
            "tree":        self.tree.to_dict(),
        }

    def plan(self, sequence: Sequence[str]) -> dict:
        """The schedule the client can mirror for a sequence."""
        delay = self.step_delay
        values = self.values_by_id()
        return {
            "sequence":       list(sequence),
            "values":         [values[nid] for nid in sequence],
            "step_delay":     delay,
            "total_duration": total_duration(len(sequence), delay),
            "schedule":       [s.to_dict() for s in build_schedule(sequence, delay, values)],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _draw(self) -> None:
        r = self.renderer
        r.clear()
        for node in self.tree.nodes.values():
            r.add_node(node.id, node.value)
        for parent_id, child_id in self.tree.edges():
            r.add_edge(parent_id, child_id)
        r.layout()
