"""Induction lab controller: owns the simulation state and runs one tick per frame."""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from faradaylab.core.config import DEFAULT_CONFIG, LabConfig
from faradaylab.core.history import HistorySample
from faradaylab.core.signals import SPEED_CONTROL, TURNS_CONTROL
from faradaylab.physics.core import PhysicsCore
from faradaylab.physics.flux import flux as flux_at
from faradaylab.simulation._sources import (
    ManualPosition,
    OscillatingPosition,
    clamp_position,
    select_source,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationState:
    """
    Snapshot of the lab. Replaced wholesale on every change, so any instance
    handed out is read-only.
    """

    position: float = 0.0
    velocity: float = 0.0
    flux: float = 0.0
    emf: float = 0.0
    emf_display: float = 0.0
    turns: int = 1
    speed: float = 1.0
    is_dragging: bool = False
    is_playing: bool = False
    time: Optional[float] = None


@dataclass(frozen=True)
class TickResult:
    """Result of one frame: state after the tick, history sample if one was taken."""

    state: SimulationState
    sample: Optional[HistorySample] = None
    advanced: bool = False


class InductionLab:
    """
    Lab orchestrator.
    Handles the frame loop body: position source -> physics core -> new state.
    User controls go through the setters; velocity, flux and EMF are only
    ever produced by the physics core.
    """

    def __init__(
        self,
        config: LabConfig = DEFAULT_CONFIG,
        start_time: Optional[float] = None,
        turns: Optional[int] = None,
        speed: Optional[float] = None,
    ) -> None:
        """
        Args:
            config: lab parameters
            start_time: clock origin in ms (None = first tick primes the clock)
            turns: initial coil turns (default config.default_turns)
            speed: initial oscillation speed (default config.default_speed)
        """
        self.config = config
        self._core = PhysicsCore(config=config, start_time=start_time)
        limit = config.max_travel
        self._manual = ManualPosition(0.0, limit=limit)
        self._oscillator = OscillatingPosition(
            amplitude=config.oscillation_amplitude,
            speed=SPEED_CONTROL.clamp(speed if speed is not None else config.default_speed),
            limit=limit,
        )
        self._state = SimulationState(
            position=0.0,
            flux=self._core.state_dict()["flux"],
            turns=int(TURNS_CONTROL.clamp(turns if turns is not None else config.default_turns)),
            speed=self._oscillator.speed,
            time=start_time,
        )

    def tick(self, time: float) -> TickResult:
        """
        Execute one frame at timestamp ``time`` (ms).

        Non-positive elapsed time leaves the state untouched and returns
        advanced=False.
        """
        st = self._state
        source = select_source(self._manual, self._oscillator, st.is_playing, st.is_dragging)
        position = source.step(time=time)["position"]

        out = self._core.step(time=time, position=position, turns=st.turns)
        if not out["advanced"]:
            return TickResult(state=st, sample=None, advanced=False)

        if source is self._oscillator:
            self._manual.value = position
        self._state = replace(
            st,
            position=position,
            velocity=out["velocity"],
            flux=out["flux"],
            emf=out["emf"],
            emf_display=out["emf_display"],
            time=time,
        )
        return TickResult(state=self._state, sample=out["sample"], advanced=True)

    # --- Controls ---

    def set_turns(self, turns: float) -> int:
        """Set coil turns, clamped to the control range. Returns the applied value."""
        n = int(TURNS_CONTROL.clamp(turns))
        self._state = replace(self._state, turns=n)
        logger.debug("turns -> %d", n)
        return n

    def set_speed(self, speed: float) -> float:
        """Set the oscillation speed multiplier, clamped and snapped. Returns the applied value."""
        s = SPEED_CONTROL.clamp(speed)
        self._oscillator.speed = s
        self._state = replace(self._state, speed=s)
        logger.debug("speed -> %.1f", s)
        return s

    def play(self) -> None:
        """Start auto-oscillation (ignored while dragging)."""
        if self._state.is_dragging:
            return
        self._state = replace(self._state, is_playing=True)
        logger.debug("play")

    def pause(self) -> None:
        self._state = replace(self._state, is_playing=False)
        logger.debug("pause")

    def toggle_play(self) -> bool:
        """Flip play state; returns the new value."""
        if self._state.is_playing:
            self.pause()
        else:
            self.play()
        return self._state.is_playing

    def begin_drag(self) -> None:
        """Start a drag: interrupts auto-play."""
        self._state = replace(self._state, is_dragging=True, is_playing=False)
        logger.debug("drag start at x=%.1f", self._state.position)

    def drag_to(self, position: float) -> float:
        """Move the magnet by hand; returns the clamped position."""
        x = clamp_position(position, self.max_travel)
        self._manual.value = x
        phi = flux_at(x, self.config.flux_scale, self.config.flux_width)
        self._state = replace(self._state, position=x, flux=phi)
        return x

    def end_drag(self) -> None:
        """Release the drag. Auto-play stays off."""
        self._state = replace(self._state, is_dragging=False)
        logger.debug("drag end at x=%.1f", self._state.position)

    def reset(self) -> None:
        """Centre the magnet, stop auto-play and clear the history in one action."""
        self._core.reset()
        self._manual.value = 0.0
        core = self._core.state_dict()
        self._state = replace(
            self._state,
            position=0.0,
            velocity=0.0,
            flux=core["flux"],
            emf=0.0,
            emf_display=0.0,
            is_playing=False,
            is_dragging=False,
        )
        logger.info("Lab reset")

    # --- Read-only views ---

    @property
    def state(self) -> SimulationState:
        return self._state

    def snapshot(self) -> SimulationState:
        """Current state; immutable, safe to hand to sinks."""
        return self._state

    @property
    def history(self) -> Tuple[HistorySample, ...]:
        """Samples currently held, oldest first."""
        return self._core.history.samples

    @property
    def max_travel(self) -> float:
        return self.config.max_travel

    @property
    def tick_count(self) -> int:
        return self._core.tick_count

    def state_dict(self) -> Dict[str, Any]:
        """Full lab state for inspection."""
        return {
            "state": self._state,
            "core": self._core.state_dict(),
            "manual": self._manual.state_dict(),
            "oscillator": self._oscillator.state_dict(),
        }
