"""
Per-tick physics of the induction lab.

physics_step() is the pure update: from the current frame time and magnet
position plus the values carried from the previous tick it derives velocity,
flux, EMF, the smoothed EMF shown on the gauge and, every K-th accepted tick,
a history sample. PhysicsCore carries those values between ticks.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from faradaylab.core.component import LabComponent
from faradaylab.core.config import DEFAULT_CONFIG, LabConfig
from faradaylab.core.history import HistorySample, InductionHistory
from faradaylab.physics.filters import smooth
from faradaylab.physics.flux import emf as emf_at
from faradaylab.physics.flux import flux as flux_at

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhysicsStep:
    """Outputs of one accepted tick."""

    velocity: float
    flux: float
    emf: float
    emf_display: float
    dt: float
    sample: Optional[HistorySample] = None


def physics_step(
    current_time: float,
    current_position: float,
    previous_position: float,
    previous_velocity: float,
    previous_emf_display: float,
    turns: int,
    previous_tick_time: float,
    tick: int = 0,
    config: LabConfig = DEFAULT_CONFIG,
) -> Optional[PhysicsStep]:
    """
    One physics update.

    Args:
        current_time: frame timestamp (ms)
        current_position: magnet position this frame, already clamped
        previous_position: magnet position at the previous accepted tick
        previous_velocity: smoothed velocity at the previous accepted tick
        previous_emf_display: smoothed EMF at the previous accepted tick
        turns: coil turns (>= 1)
        previous_tick_time: timestamp of the previous accepted tick (ms)
        tick: 1-based index of this tick among accepted ticks; a sample is
            attached when it is a multiple of config.history_every
        config: model parameters

    Returns:
        PhysicsStep, or None when the elapsed time is not positive.
    """
    dt = (current_time - previous_tick_time) / 1000.0
    if not dt > 0:
        return None

    raw_velocity = (current_position - previous_position) / dt
    velocity = smooth(previous_velocity, raw_velocity, config.velocity_smoothing)

    phi = flux_at(current_position, config.flux_scale, config.flux_width)
    emf = emf_at(current_position, velocity, turns, config.flux_scale, config.flux_width)

    emf_display = smooth(previous_emf_display, emf, config.emf_smoothing)

    sample = None
    if tick > 0 and tick % config.history_every == 0:
        sample = HistorySample.from_tick(current_time, phi, emf)

    return PhysicsStep(
        velocity=velocity,
        flux=phi,
        emf=emf,
        emf_display=emf_display,
        dt=dt,
        sample=sample,
    )


class PhysicsCore(LabComponent):
    """
    Stateful physics core: carries position, velocity, displayed EMF and the
    last tick time between frames, counts accepted ticks and owns the history.
    """

    def __init__(
        self,
        config: LabConfig = DEFAULT_CONFIG,
        start_time: Optional[float] = None,
        history: Optional[InductionHistory] = None,
    ) -> None:
        """
        Args:
            config: model parameters
            start_time: clock origin (ms). If None the first step() only
                primes the clock.
            history: buffer receiving the samples (default: new one sized
                by config.history_max)
        """
        self.config = config
        self.history = history if history is not None else InductionHistory(config.history_max)
        self._start_time = start_time
        self._last_time: Optional[float] = start_time
        self._position = 0.0
        self._velocity = 0.0
        self._flux = flux_at(0.0, config.flux_scale, config.flux_width)
        self._emf = 0.0
        self._emf_display = 0.0
        self._ticks = 0

    def initialize(self, **kwargs: Any) -> None:
        """Reset carried values; ``position`` and ``time`` are optional."""
        self._position = float(kwargs.get("position", 0.0))
        self._last_time = kwargs.get("time", self._start_time)
        self._velocity = 0.0
        self._flux = flux_at(self._position, self.config.flux_scale, self.config.flux_width)
        self._emf = 0.0
        self._emf_display = 0.0
        self._ticks = 0
        self.history.clear()

    def reset(self, time: Optional[float] = None) -> None:
        """Back to the start state: magnet centred, zero velocity, empty history."""
        self.initialize(position=0.0, time=time if time is not None else self._last_time)

    def step(self, *, time: float, position: float = 0.0, turns: int = 1, **kwargs: Any) -> Dict[str, Any]:
        """
        Advance one frame.

        Returns:
            Dict with 'advanced' (bool), 'velocity', 'flux', 'emf',
            'emf_display' and 'sample' (HistorySample or None).
        """
        if self._last_time is None:
            self._last_time = time
            self._position = float(position)
            self._flux = flux_at(self._position, self.config.flux_scale, self.config.flux_width)
            logger.debug("Clock primed at t=%.3f ms", time)
            return self._outputs(advanced=False)

        out = physics_step(
            current_time=time,
            current_position=float(position),
            previous_position=self._position,
            previous_velocity=self._velocity,
            previous_emf_display=self._emf_display,
            turns=turns,
            previous_tick_time=self._last_time,
            tick=self._ticks + 1,
            config=self.config,
        )
        if out is None:
            return self._outputs(advanced=False)

        self._ticks += 1
        self._last_time = time
        self._position = float(position)
        self._velocity = out.velocity
        self._flux = out.flux
        self._emf = out.emf
        self._emf_display = out.emf_display
        if out.sample is not None:
            self.history.append(out.sample)
        return self._outputs(advanced=True, sample=out.sample)

    def _outputs(self, advanced: bool, sample: Optional[HistorySample] = None) -> Dict[str, Any]:
        return {
            "advanced": advanced,
            "velocity": self._velocity,
            "flux": self._flux,
            "emf": self._emf,
            "emf_display": self._emf_display,
            "sample": sample,
        }

    @property
    def tick_count(self) -> int:
        """Accepted ticks since the last reset."""
        return self._ticks

    @property
    def last_time(self) -> Optional[float]:
        return self._last_time

    def state_dict(self) -> Dict[str, Any]:
        return {
            "time": self._last_time,
            "position": self._position,
            "velocity": self._velocity,
            "flux": self._flux,
            "emf": self._emf,
            "emf_display": self._emf_display,
            "ticks": self._ticks,
            "history_length": len(self.history),
        }
