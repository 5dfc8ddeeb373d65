"""
Real-time chart of flux and EMF history.

Accepts an InductionHistory or any iterable of HistorySample (e.g. the tuple
returned by InductionLab.history). Only the samples passed in are drawn;
nothing is cached between calls. Matplotlib is imported lazily.
"""

from typing import Any, Iterable, Optional, Tuple

import numpy as np

from faradaylab.core.history import HistorySample
from faradaylab.core.signals import EMF_SIGNAL, FLUX_SIGNAL

FLUX_COLOR = "#8884d8"
EMF_COLOR = "#82ca9d"


def chart_series(history: Iterable[HistorySample]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return (time, flux, emf) arrays, oldest sample first."""
    samples = list(history)
    t = np.array([s.time for s in samples], dtype=float)
    phi = np.array([s.flux for s in samples], dtype=float)
    e = np.array([s.emf for s in samples], dtype=float)
    return t, phi, e


def plot_history(
    history: Iterable[HistorySample],
    ax: Optional[Any] = None,
    emf_ax: Optional[Any] = None,
    title: str = "Real-time Data",
) -> Tuple[Any, Any]:
    """
    Plot flux (left axis) and EMF (independent right axis) against time.

    Args:
        history: samples to draw.
        ax: matplotlib axes for flux (if None, creates new figure).
        emf_ax: axes for EMF; default is ax.twinx(). Pass the previous one to
            redraw in place.
        title: axes title.

    Returns:
        (flux_axes, emf_axes).
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for plot_history.")
    t, phi, e = chart_series(history)
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(8, 3))
    if emf_ax is None:
        emf_ax = ax.twinx()
    ax.clear()
    emf_ax.clear()

    flux_line, = ax.plot(t, phi, color=FLUX_COLOR, lw=2, label=FLUX_SIGNAL.description)
    emf_line, = emf_ax.plot(t, e, color=EMF_COLOR, lw=2, label=EMF_SIGNAL.description)
    emf_ax.yaxis.set_label_position("right")
    emf_ax.yaxis.tick_right()

    ax.set_xlabel("Time")
    ax.set_ylabel("Flux (Φ)", color=FLUX_COLOR)
    emf_ax.set_ylabel("EMF (ε)", color=EMF_COLOR)
    ax.set_xticks([])
    ax.grid(True, alpha=0.3, linestyle="--")
    ax.legend(handles=[flux_line, emf_line], loc="upper left", fontsize=8)
    if title:
        ax.set_title(title, fontsize=10, loc="left")
    return ax, emf_ax
