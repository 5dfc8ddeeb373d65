"""Tunable parameters of the lab, grouped in one immutable record."""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from faradaylab import constants as C


@dataclass(frozen=True)
class LabConfig:
    """
    Parameters shared by physics core, position source and controller.

    Every field defaults to the matching value in faradaylab.constants.
    """

    canvas_width: float = C.CANVAS_WIDTH
    magnet_width: float = C.MAGNET_WIDTH
    flux_scale: float = C.FLUX_SCALE
    flux_width: float = C.FLUX_WIDTH
    velocity_smoothing: float = C.VELOCITY_SMOOTHING
    emf_smoothing: float = C.EMF_SMOOTHING
    history_max: int = C.HISTORY_MAX
    history_every: int = C.HISTORY_EVERY
    oscillation_amplitude: float = C.OSCILLATION_AMPLITUDE
    default_turns: int = C.DEFAULT_TURNS
    default_speed: float = C.DEFAULT_SPEED

    def __post_init__(self) -> None:
        if self.canvas_width <= self.magnet_width:
            raise ValueError("canvas_width must be larger than magnet_width")
        if self.flux_scale <= 0 or self.flux_width <= 0:
            raise ValueError("flux_scale and flux_width must be positive")
        for name in ("velocity_smoothing", "emf_smoothing"):
            alpha = getattr(self, name)
            if not 0.0 <= alpha < 1.0:
                raise ValueError(f"{name} must be in [0, 1), got {alpha}")
        if self.history_max < 1 or self.history_every < 1:
            raise ValueError("history_max and history_every must be >= 1")
        if self.oscillation_amplitude < 0:
            raise ValueError("oscillation_amplitude must be >= 0")

    @property
    def max_travel(self) -> float:
        """Half-width of the admissible magnet positions."""
        return self.canvas_width / 2 - self.magnet_width / 2

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LabConfig":
        """Build from a plain dict; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)


DEFAULT_CONFIG = LabConfig()
