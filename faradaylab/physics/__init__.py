"""
Physics of the lab.

  - flux: analytic flux model and Faraday EMF (pure functions)
  - filters: exponential smoothing
  - core: per-tick update (physics_step) and its stateful wrapper (PhysicsCore)
"""

from faradaylab.physics.filters import smooth
from faradaylab.physics.flux import emf, flux, flux_gradient, flux_rate
from faradaylab.physics.core import PhysicsCore, PhysicsStep, physics_step

__all__ = [
    # Filters
    "smooth",
    # Flux model
    "flux",
    "flux_gradient",
    "flux_rate",
    "emf",
    # Core
    "physics_step",
    "PhysicsStep",
    "PhysicsCore",
]
