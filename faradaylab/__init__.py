"""
faradaylab: interactive simulation of electromagnetic induction (magnet, coil, Faraday's law).
"""

__version__ = "0.1.0"

from faradaylab.core.config import LabConfig
from faradaylab.core.system import InductionLab, SimulationState, TickResult
from faradaylab.simulation.driver import FrameDriver

__all__ = [
    "__version__",
    "LabConfig",
    "InductionLab",
    "SimulationState",
    "TickResult",
    "FrameDriver",
]
