"""
animation/
----------
Playback layer.

    from animation import AnimationScheduler, VirtualClock, Visualizer
"""

from animation.clock      import Clock, TaskQueue, VirtualClock, MonotonicClock
from animation.renderer   import Renderer, RecordingRenderer
from animation.schedule   import (
    ScheduledStep, build_schedule, clamp_speed, effective_delay, total_duration,
)
from animation.scheduler  import AnimationScheduler, AnimationRun, SchedulerState
from animation.visualizer import Visualizer

__all__ = [
    "Clock",
    "TaskQueue",
    "VirtualClock",
    "MonotonicClock",
    "Renderer",
    "RecordingRenderer",
    "ScheduledStep",
    "build_schedule",
    "clamp_speed",
    "effective_delay",
    "total_duration",
    "AnimationScheduler",
    "AnimationRun",
    "SchedulerState",
    "Visualizer",
]
