"""
scheduler.py — Timed Highlight Scheduler
========================================
Plays a traversal sequence back as a moving single-node highlight.

State machine:
    IDLE     →  animate()                  →  RUNNING
    RUNNING  →  (last step + completion)   →  IDLE
    RUNNING  →  animate()                  →  rejected, stays RUNNING

While RUNNING every new animate() is refused so two timed sequences can
never interleave on the same renderer.  There is no cancel: once
started, a run plays to the end.

All timing goes through a Clock (see clock.py): animate() only queues
work and returns immediately; the steps fire when the clock is advanced
(VirtualClock) or ticked (MonotonicClock).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Callable, List, Optional, Sequence

from bst import NodeStyle
from animation.clock import Clock
from animation.renderer import Renderer
from animation.schedule import ScheduledStep, build_schedule, total_duration


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class SchedulerState(Enum):
    IDLE    = "idle"
    RUNNING = "running"


@dataclass
class AnimationRun:
    """
    State of one animate() call.

    Attributes:
        sequence    : Node ids in visit order.
        step_delay  : Pause between steps, in ms.
        started_at  : Clock time when the run was queued.
        steps       : The explicit schedule.
        highlighted : Node currently highlighted by this run.
        fired       : Number of steps applied so far.
        finished    : True once the completion notification went out.
    """

    sequence:     List[str]
    step_delay:   float
    started_at:   float
    steps:        List[ScheduledStep] = field(default_factory=list)
    highlighted:  Optional[str]       = None
    fired:        int                 = 0
    finished:     bool                = False

    @property
    def duration(self) -> float:
        return total_duration(len(self.sequence), self.step_delay)


class AnimationScheduler:
    """
    Attributes:
        renderer    : Where style changes are sent.
        clock       : Drives the deferred steps.
        state       : Current SchedulerState.
        run         : The current (or last) AnimationRun, None before the first.
        on_busy     : Optional callback(bool) fired on every IDLE/RUNNING change.
                      The UI disables its controls while it reads True.
        on_step     : Optional callback(ScheduledStep) after each highlight.
        on_complete : Optional callback(AnimationRun) when a run ends.
    """

    def __init__(
        self,
        renderer: Renderer,
        clock: Clock,
        on_busy: Optional[Callable[[bool], None]] = None,
        on_step: Optional[Callable[[ScheduledStep], None]] = None,
        on_complete: Optional[Callable[[AnimationRun], None]] = None,
    ):
        self.renderer = renderer
        self.clock = clock
        self.state: SchedulerState = SchedulerState.IDLE
        self.run: Optional[AnimationRun] = None
        self.on_busy = on_busy
        self.on_step = on_step
        self.on_complete = on_complete

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def animate(self, sequence: Sequence[str], step_delay: float) -> bool:
        """
        Queue a run.  Returns False (and queues nothing) if one is already
        RUNNING.  An empty sequence completes immediately.
        """
        if self.state == SchedulerState.RUNNING:
            logger.warning("Animation already running; request ignored")
            return False

        steps = build_schedule(sequence, step_delay)
        run = AnimationRun(
            sequence=list(sequence),
            step_delay=step_delay,
            started_at=self.clock.now(),
            steps=steps,
        )
        self.run = run
        self._set_state(SchedulerState.RUNNING)
        logger.info(
            "Animating %d step(s) at %s ms per step (%s ms total)",
            len(steps), step_delay, run.duration,
        )

        if not steps:
            self._finish(run)
            return True

        for step in steps:
            self.clock.call_later(step.at, partial(self._apply, run, step))
        # queued after the last step, so at the same offset it fires second
        self.clock.call_later(run.duration, partial(self._finish, run))
        return True

    def reset_styles(self, node_ids: Optional[Sequence[str]] = None) -> None:
        """Every node back to neutral, right now.  Valid in any state."""
        ids = list(node_ids) if node_ids is not None else self.renderer.node_ids()
        for node_id in ids:
            self.renderer.set_node_style(node_id, NodeStyle.NEUTRAL)
        if self.run is not None:
            self.run.highlighted = None

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.state == SchedulerState.RUNNING

    @property
    def highlighted(self) -> Optional[str]:
        return self.run.highlighted if self.run else None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _apply(self, run: AnimationRun, step: ScheduledStep) -> None:
        if run.highlighted is not None:
            self.renderer.set_node_style(run.highlighted, NodeStyle.NEUTRAL)
        self.renderer.set_node_style(step.node_id, NodeStyle.HIGHLIGHT)
        run.highlighted = step.node_id
        run.fired += 1
        if self.on_step:
            self.on_step(step)

    def _finish(self, run: AnimationRun) -> None:
        # the last node keeps its highlight
        run.finished = True
        self._set_state(SchedulerState.IDLE)
        logger.info("Animation finished after %d step(s)", run.fired)
        if self.on_complete:
            self.on_complete(run)

    def _set_state(self, state: SchedulerState) -> None:
        if state == self.state:
            return
        self.state = state
        if self.on_busy:
            self.on_busy(state == SchedulerState.RUNNING)
