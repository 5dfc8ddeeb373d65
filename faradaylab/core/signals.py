"""Standard description of displayed signals and of the user controls (name, unit, range)."""

import math
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class SignalSpec:
    """A displayed quantity: name, unit, label."""

    name: str
    unit: str = ""
    description: str = ""

    @property
    def label(self) -> str:
        return f"{self.description} ({self.unit})" if self.unit else self.description


@dataclass(frozen=True)
class ControlSpec:
    """
    A slider: admissible range and step.

    Values outside the range are clamped and then snapped to the step grid
    anchored at ``minimum``, the way a range input behaves.
    """

    name: str
    minimum: float
    maximum: float
    step: float
    unit: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if self.maximum < self.minimum:
            raise ValueError(f"{self.name}: maximum < minimum")
        if self.step <= 0:
            raise ValueError(f"{self.name}: step must be positive")

    def clamp(self, value: float) -> float:
        """Clamp to [minimum, maximum] and snap to the nearest step."""
        if math.isnan(value):
            return self.minimum
        v = min(max(float(value), self.minimum), self.maximum)
        n = round((v - self.minimum) / self.step)
        return min(self.minimum + n * self.step, self.maximum)

    def values(self) -> List[float]:
        """All admissible values, ascending."""
        n = int(math.floor((self.maximum - self.minimum) / self.step + 1e-9))
        return [self.minimum + i * self.step for i in range(n + 1)]


TURNS_CONTROL = ControlSpec("turns", 1, 20, 1, description="Coil Turns (N)")
SPEED_CONTROL = ControlSpec("speed", 0.5, 3.0, 0.5, unit="x", description="Magnet Speed (Auto)")

FLUX_SIGNAL = SignalSpec("flux", "Wb", "Magnetic Flux")
EMF_SIGNAL = SignalSpec("emf", "mV", "Induced EMF")
VELOCITY_SIGNAL = SignalSpec("velocity", "px/s", "Velocity")
POSITION_SIGNAL = SignalSpec("position", "px", "Position")
