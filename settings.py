"""
settings.py — Visualizer Configuration
=======================================
Every tunable number the visualizer uses lives here: how big a random
tree can get, which values it holds, and the speed slider range.

    from settings import VisualizerConfig, SPEED_PRESETS

The Flask app builds one config from its own `app.config` (which reads
`BSTVIS_*` environment variables), so the same dataclass is used by the
web layer and by tests.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping


# ---------------------------------------------------------------------------
# Speed presets (slider positions); higher speed means a shorter pause
# ---------------------------------------------------------------------------
SPEED_PRESETS: Dict[str, int] = {
    "slow":   100,    # teaching mode
    "medium": 500,
    "fast":   800,    # demo mode
    "turbo":  1000,
}


@dataclass
class VisualizerConfig:
    """
    Attributes:
        count_min, count_max : Inclusive range for the number of values drawn.
        value_min, value_max : Inclusive range for each value.
        min_speed, max_speed : Speed slider range (also the delay range, in ms).
        speed_step           : Slider increment.
        default_speed        : Initial slider position.
        default_order        : Registry key of the initially selected order.
        log_level            : Name of the logging level used by the app.
    """

    count_min:     int = 10
    count_max:     int = 100
    value_min:     int = 1
    value_max:     int = 100
    min_speed:     int = 100
    max_speed:     int = 1000
    speed_step:    int = 100
    default_speed: int = SPEED_PRESETS["medium"]
    default_order: str = "pre_order"
    log_level:     str = "INFO"

    def __post_init__(self):
        if self.count_min < 1:
            raise ValueError(f"count_min must be at least 1, got {self.count_min}")
        if self.count_min > self.count_max:
            raise ValueError(f"count range is inverted: {self.count_min} > {self.count_max}")
        if self.value_min > self.value_max:
            raise ValueError(f"value range is inverted: {self.value_min} > {self.value_max}")
        if self.min_speed <= 0 or self.min_speed > self.max_speed:
            raise ValueError(f"invalid speed range: [{self.min_speed}, {self.max_speed}]")
        if self.speed_step <= 0:
            raise ValueError(f"speed_step must be positive, got {self.speed_step}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "VisualizerConfig":
        """
        Pick the known keys out of a mapping such as Flask's `app.config`.
        Keys may be given in lower case or upper case (`COUNT_MIN`).
        """
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            for key in (f.name, f.name.upper()):
                if key in data:
                    value = data[key]
                    kwargs[f.name] = value if f.type is str else int(value)
                    break
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
