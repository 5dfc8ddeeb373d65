"""Core: lab controller, state, history and control specs."""

from faradaylab.core.component import LabComponent
from faradaylab.core.config import DEFAULT_CONFIG, LabConfig
from faradaylab.core.history import HistorySample, InductionHistory
from faradaylab.core.signals import SPEED_CONTROL, TURNS_CONTROL, ControlSpec, SignalSpec
from faradaylab.core.system import InductionLab, SimulationState, TickResult

__all__ = [
    "LabComponent",
    "DEFAULT_CONFIG",
    "LabConfig",
    "HistorySample",
    "InductionHistory",
    "ControlSpec",
    "SignalSpec",
    "TURNS_CONTROL",
    "SPEED_CONTROL",
    "InductionLab",
    "SimulationState",
    "TickResult",
]
