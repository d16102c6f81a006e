"""
schedule.py — Highlight Schedule
================================
Turns a traversal sequence into an explicit list of timed steps, and the
user's speed setting into the per-step delay.

A ScheduledStep is a SNAPSHOT of one moment of playback:

    at ms  →  restore `previous_node` to neutral (if any)
              highlight `node_id`

Step i fires at i × delay, so offsets are strictly increasing and the
highlight moves one node at a time.  The last step is flagged
`is_final`; the animation is over at its offset.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence


@dataclass(frozen=True)
class ScheduledStep:
    """
    Attributes:
        step_number   : 0-based position in the sequence.
        at            : Offset from the start of the run, in ms.
        node_id       : Node highlighted at this step.
        previous_node : Node restored to neutral first (None on step 0).
        is_final      : True on the last step.
        overlay       : Free-form extras for the UI (e.g. the node's value).
    """

    step_number:    int
    at:             float
    node_id:        str
    previous_node:  Optional[str] = None
    is_final:       bool          = False
    overlay:        Dict[str, object] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "step_number":   self.step_number,
            "at":            self.at,
            "node_id":       self.node_id,
            "previous_node": self.previous_node,
            "is_final":      self.is_final,
            "overlay":       dict(self.overlay),
        }


def build_schedule(
    sequence: Sequence[str],
    step_delay: float,
    values: Optional[Dict[str, int]] = None,
) -> List[ScheduledStep]:
    """One ScheduledStep per id in `sequence`; `values` fills the overlay."""
    if step_delay <= 0:
        raise ValueError(f"step_delay must be positive, got {step_delay}")

    steps: List[ScheduledStep] = []
    last = len(sequence) - 1
    for i, node_id in enumerate(sequence):
        overlay: Dict[str, object] = {}
        if values is not None and node_id in values:
            overlay["value"] = values[node_id]
        steps.append(ScheduledStep(
            step_number=i,
            at=i * step_delay,
            node_id=node_id,
            previous_node=sequence[i - 1] if i > 0 else None,
            is_final=(i == last),
            overlay=overlay,
        ))
    return steps


def total_duration(length: int, step_delay: float) -> float:
    """Time from the first highlight to the last; 0 for 0 or 1 steps."""
    return step_delay * max(length - 1, 0)


# ---------------------------------------------------------------------------
# Speed → delay
# ---------------------------------------------------------------------------
def clamp_speed(speed: float, min_speed: int, max_speed: int, speed_step: int) -> int:
    """Clamp into [min_speed, max_speed] and snap to the slider grid."""
    speed = max(min_speed, min(max_speed, speed))
    snapped = min_speed + round((speed - min_speed) / speed_step) * speed_step
    return int(min(snapped, max_speed))


def effective_delay(
    speed: float,
    min_speed: int = 100,
    max_speed: int = 1000,
    speed_step: int = 100,
) -> int:
    """
    Inverting transform: a faster setting gives a shorter pause.

        delay = max_speed + min_speed − speed
    """
    speed = clamp_speed(speed, min_speed, max_speed, speed_step)
    return max_speed + min_speed - speed
