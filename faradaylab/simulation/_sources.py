"""
Magnet position sources: manual (drag) or harmonic auto-oscillation.

A source is a tagged variant resolved once per tick into a scalar position:

  ManualPosition(value)                 -> value
  OscillatingPosition(amplitude, speed) -> amplitude * sin(t * 0.001 * omega), omega = 2 * speed

Both clamp to the travel range so the magnet never overlaps the view edge.
"""

import math
from abc import abstractmethod
from typing import Any, Dict

from faradaylab.constants import CANVAS_WIDTH, DEFAULT_SPEED, MAGNET_WIDTH, OSCILLATION_AMPLITUDE
from faradaylab.core.component import LabComponent


def max_travel(canvas_width: float = CANVAS_WIDTH, magnet_width: float = MAGNET_WIDTH) -> float:
    """Half the view span minus half the magnet width."""
    return canvas_width / 2 - magnet_width / 2


def clamp_position(x: float, limit: float) -> float:
    """Clamp x to [-limit, limit]."""
    return max(-limit, min(limit, float(x)))


class PositionSource(LabComponent):
    """Base class: step(time=...) -> {'position': x}."""

    def __init__(self, limit: float) -> None:
        self.limit = float(limit)

    @abstractmethod
    def resolve(self, time: float) -> float:
        """Magnet position at frame time ``time`` (ms), clamped to the travel range."""
        pass

    def initialize(self, **kwargs: Any) -> None:
        pass

    def step(self, *, time: float, **kwargs: Any) -> Dict[str, Any]:
        return {"position": self.resolve(time)}


class ManualPosition(PositionSource):
    """Holds the last value set by a drag; constant between drag events."""

    def __init__(self, value: float = 0.0, limit: float = max_travel()) -> None:
        super().__init__(limit)
        self.value = clamp_position(value, self.limit)

    def resolve(self, time: float) -> float:
        return self.value

    def initialize(self, **kwargs: Any) -> None:
        self.value = clamp_position(kwargs.get("position", 0.0), self.limit)

    def state_dict(self) -> Dict[str, Any]:
        return {"mode": "manual", "value": self.value}


class OscillatingPosition(PositionSource):
    """
    Harmonic auto-motion of the magnet through the coil.

    The phase is tied to the absolute frame time, so resuming play makes the
    magnet jump to where the oscillation currently is.
    """

    def __init__(
        self,
        amplitude: float = OSCILLATION_AMPLITUDE,
        speed: float = DEFAULT_SPEED,
        limit: float = max_travel(),
    ) -> None:
        """
        Args:
            amplitude: peak displacement (px)
            speed: speed multiplier; angular frequency omega = 2 * speed (rad/s)
            limit: travel half-width used for clamping
        """
        super().__init__(limit)
        self.amplitude = float(amplitude)
        self.speed = float(speed)

    @property
    def omega(self) -> float:
        return 2.0 * self.speed

    def resolve(self, time: float) -> float:
        x = self.amplitude * math.sin(time * 0.001 * self.omega)
        return clamp_position(x, self.limit)

    def state_dict(self) -> Dict[str, Any]:
        return {"mode": "oscillating", "amplitude": self.amplitude, "speed": self.speed}


def select_source(
    manual: ManualPosition,
    oscillating: OscillatingPosition,
    is_playing: bool,
    is_dragging: bool,
) -> PositionSource:
    """Drag wins over play; play selects the oscillator; otherwise manual."""
    if is_playing and not is_dragging:
        return oscillating
    return manual
