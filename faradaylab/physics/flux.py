"""
Analytic flux model of a bar magnet sliding through a coil.

    flux(x)    = A * exp(-(x / w)^2)
    dflux/dx   = flux(x) * (-2 x / w^2)
    emf(x, v)  = -N * dflux/dx * v        (Faraday: emf = -N dPhi/dt)

A hand-tuned Gaussian, not a field solution. All functions accept scalars or
numpy arrays.
"""

from typing import Union

import numpy as np

from faradaylab.constants import FLUX_SCALE, FLUX_WIDTH

ArrayLike = Union[float, np.ndarray]


def flux(position: ArrayLike, scale: float = FLUX_SCALE, width: float = FLUX_WIDTH) -> ArrayLike:
    """Flux linked by the coil with the magnet at ``position``."""
    x = np.asarray(position, dtype=float)
    phi = scale * np.exp(-((x / width) ** 2))
    return float(phi) if phi.ndim == 0 else phi


def flux_gradient(position: ArrayLike, scale: float = FLUX_SCALE, width: float = FLUX_WIDTH) -> ArrayLike:
    """Closed-form dflux/dx."""
    x = np.asarray(position, dtype=float)
    g = flux(x, scale, width) * (-2.0 * x / width ** 2)
    return float(g) if np.ndim(g) == 0 else g


def flux_rate(
    position: ArrayLike,
    velocity: ArrayLike,
    scale: float = FLUX_SCALE,
    width: float = FLUX_WIDTH,
) -> ArrayLike:
    """dflux/dt by the chain rule."""
    r = np.asarray(flux_gradient(position, scale, width)) * np.asarray(velocity, dtype=float)
    return float(r) if r.ndim == 0 else r


def emf(
    position: ArrayLike,
    velocity: ArrayLike,
    turns: int,
    scale: float = FLUX_SCALE,
    width: float = FLUX_WIDTH,
) -> ArrayLike:
    """Instantaneous induced EMF (unscaled)."""
    e = -turns * np.asarray(flux_rate(position, velocity, scale, width))
    # -0.0 -> 0.0
    e = e + 0.0
    return float(e) if e.ndim == 0 else e

