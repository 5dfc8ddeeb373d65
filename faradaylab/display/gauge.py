"""
Needle gauge (galvanometer) for the displayed EMF.

The reading is clamped before mapping, so the needle pins at the extremes and
never overshoots.
"""

from typing import Any, List, Optional

import numpy as np

from faradaylab.constants import GAUGE_DISPLAY_SCALE, GAUGE_INPUT_LIMIT, MAX_NEEDLE_DEFLECTION


def gauge_reading(state: Any, scale: float = GAUGE_DISPLAY_SCALE) -> float:
    """Gauge value (mV) for a SimulationState: smoothed EMF times the display scale."""
    return float(state.emf_display) * scale


def needle_angle(
    reading: float,
    input_limit: float = GAUGE_INPUT_LIMIT,
    max_deflection: float = MAX_NEEDLE_DEFLECTION,
) -> float:
    """Map a reading in [-input_limit, input_limit] linearly to degrees in [-max_deflection, max_deflection]."""
    clamped = max(-input_limit, min(input_limit, float(reading)))
    return clamped / input_limit * max_deflection


def tick_angles(n: int = 11, max_deflection: float = MAX_NEEDLE_DEFLECTION) -> List[float]:
    """Evenly spaced scale ticks across the dial."""
    return list(np.linspace(-max_deflection, max_deflection, n))


def draw_gauge(
    reading: float,
    ax: Optional[Any] = None,
    unit: str = "mV",
    label: str = "Induced EMF",
) -> Any:
    """
    Draw the dial with its needle on a matplotlib axes.

    Angles are measured from vertical, positive to the right.

    Returns:
        matplotlib axes.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for draw_gauge.")
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(4, 2.6))
    ax.clear()
    ax.set_aspect("equal")
    ax.set_xlim(-1.15, 1.15)
    ax.set_ylim(-0.35, 1.15)
    ax.axis("off")

    arc = np.radians(np.linspace(-MAX_NEEDLE_DEFLECTION, MAX_NEEDLE_DEFLECTION, 100))
    ax.plot(np.sin(arc), np.cos(arc), color="0.5", lw=2)
    for a in np.radians(tick_angles()):
        ax.plot([0.9 * np.sin(a), np.sin(a)], [0.9 * np.cos(a), np.cos(a)], color="0.5", lw=1)

    theta = np.radians(needle_angle(reading))
    ax.plot([0, 0.85 * np.sin(theta)], [0, 0.85 * np.cos(theta)], color="tab:red", lw=3, solid_capstyle="round")
    ax.plot([0], [0], "o", color="0.2", ms=8)
    ax.text(0, -0.15, f"{reading:.2f} {unit}", ha="center", va="center", family="monospace", fontsize=12)
    ax.text(0, -0.3, label.upper(), ha="center", va="center", fontsize=8, color="0.4")
    return ax
