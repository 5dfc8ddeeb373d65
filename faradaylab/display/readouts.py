"""Text readouts shown over the simulation view."""

from typing import Any, Dict

from faradaylab.core.signals import POSITION_SIGNAL, VELOCITY_SIGNAL
from faradaylab.display.gauge import gauge_reading


def direction_of(velocity: float) -> str:
    if velocity > 0:
        return "forward"
    if velocity < 0:
        return "backward"
    return "still"


def format_readouts(state: Any) -> Dict[str, str]:
    """Velocity (1 decimal), position (integer), gauge EMF (2 decimals) and direction of motion."""
    return {
        "velocity": f"{state.velocity:.1f}",
        "position": f"{state.position:.0f}",
        "emf": f"{gauge_reading(state):.2f} mV",
        "direction": direction_of(state.velocity),
    }


def readout_text(state: Any) -> str:
    """Two-line overlay: labelled velocity and position."""
    r = format_readouts(state)
    return "\n".join([
        f"{VELOCITY_SIGNAL.description}: {r['velocity']} {VELOCITY_SIGNAL.unit}",
        f"{POSITION_SIGNAL.description}: {r['position']} {POSITION_SIGNAL.unit}",
    ])
