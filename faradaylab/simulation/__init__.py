"""
Simulation: magnet position sources and the frame driver.
"""

from faradaylab.simulation._sources import (
    ManualPosition,
    OscillatingPosition,
    PositionSource,
    clamp_position,
    max_travel,
    select_source,
)
from faradaylab.simulation.driver import FrameDriver, perf_clock_ms

__all__ = [
    "PositionSource",
    "ManualPosition",
    "OscillatingPosition",
    "clamp_position",
    "max_travel",
    "select_source",
    "FrameDriver",
    "perf_clock_ms",
]
