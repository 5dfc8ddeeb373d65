"""Tests for the InductionLab controller: controls, position sources, reset."""

import dataclasses
import math

import pytest

from faradaylab import InductionLab, LabConfig
from faradaylab.constants import FLUX_SCALE, OSCILLATION_AMPLITUDE
from faradaylab.physics.flux import flux as flux_at
from faradaylab.simulation import (
    ManualPosition,
    OscillatingPosition,
    PositionSource,
    clamp_position,
    max_travel,
    select_source,
)

FRAME_MS = 1000.0 / 60.0


def _run(lab: InductionLab, n: int, t0: float = 0.0) -> float:
    t = t0
    for _ in range(n):
        t += FRAME_MS
        lab.tick(t)
    return t


def test_initial_state() -> None:
    lab = InductionLab(start_time=0.0)
    st = lab.state
    assert st.position == 0.0
    assert st.flux == FLUX_SCALE
    assert st.turns == 5
    assert st.speed == 1.0
    assert not st.is_playing and not st.is_dragging
    assert lab.history == ()


def test_state_is_read_only() -> None:
    lab = InductionLab(start_time=0.0)
    snap = lab.snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.emf = 3.0  # type: ignore[misc]
    lab.drag_to(50.0)
    assert snap.position == 0.0
    assert lab.state.position == 50.0


def test_max_travel() -> None:
    assert max_travel(800, 120) == 340.0
    assert InductionLab().max_travel == 340.0
    assert clamp_position(1000.0, 340.0) == 340.0
    assert clamp_position(-1000.0, 340.0) == -340.0


def test_drag_to_clamps() -> None:
    lab = InductionLab(start_time=0.0)
    assert lab.drag_to(500.0) == 340.0
    assert lab.drag_to(-999.0) == -340.0


def test_drag_publishes_flux_of_new_position() -> None:
    lab = InductionLab(start_time=0.0)
    lab.begin_drag()
    lab.drag_to(100.0)
    st = lab.snapshot()
    assert st.position == 100.0
    assert st.flux == pytest.approx(flux_at(100.0))
    lab.drag_to(900.0)
    assert lab.state.flux == pytest.approx(flux_at(lab.max_travel))


def test_reset_during_drag_ends_it() -> None:
    lab = InductionLab(start_time=0.0)
    lab.begin_drag()
    lab.drag_to(-120.0)
    lab.reset()
    assert not lab.state.is_dragging
    assert lab.state.position == 0.0
    assert lab.state.flux == FLUX_SCALE


def test_drag_stops_play_and_release_does_not_resume() -> None:
    lab = InductionLab(start_time=0.0)
    lab.play()
    assert lab.state.is_playing
    lab.begin_drag()
    assert lab.state.is_dragging
    assert not lab.state.is_playing
    lab.play()  # ignored while dragging
    assert not lab.state.is_playing
    lab.end_drag()
    assert not lab.state.is_dragging
    assert not lab.state.is_playing


def test_manual_position_held_between_drags() -> None:
    lab = InductionLab(start_time=0.0)
    lab.begin_drag()
    lab.drag_to(-120.0)
    lab.end_drag()
    _run(lab, 10)
    assert lab.state.position == -120.0
    assert lab.state.velocity != 0.0  # decays from the jump
    t = _run(lab, 60)
    assert lab.state.position == -120.0
    assert abs(lab.state.velocity) < 1e-6
    assert abs(lab.state.emf) < 1e-6
    assert lab.state.time == pytest.approx(t)


def test_auto_oscillation_follows_sine() -> None:
    lab = InductionLab(start_time=0.0, speed=1.5)
    lab.play()
    t = 0.0
    for _ in range(30):
        t += FRAME_MS
        result = lab.tick(t)
        expected = OSCILLATION_AMPLITUDE * math.sin(t * 0.001 * 2 * 1.5)
        assert result.state.position == pytest.approx(expected)
        assert abs(result.state.position) <= lab.max_travel


def test_pause_freezes_position() -> None:
    lab = InductionLab(start_time=0.0)
    lab.play()
    t = _run(lab, 20)
    frozen = lab.state.position
    assert frozen != 0.0
    lab.toggle_play()
    assert not lab.state.is_playing
    _run(lab, 20, t0=t)
    assert lab.state.position == frozen


def test_setters_clamp_to_control_range() -> None:
    lab = InductionLab(start_time=0.0)
    assert lab.set_turns(0) == 1
    assert lab.set_turns(99) == 20
    assert lab.set_turns(12) == 12
    assert lab.state.turns == 12
    assert lab.set_speed(0.1) == 0.5
    assert lab.set_speed(2.2) == 2.0
    assert lab.state.speed == 2.0


def test_emf_scales_with_turns_through_lab() -> None:
    results = []
    for turns in (3, 6):
        lab = InductionLab(start_time=0.0, turns=turns)
        lab.play()
        _run(lab, 25)
        results.append(lab.state.emf)
    assert results[1] == pytest.approx(2 * results[0])


def test_no_op_tick_leaves_state() -> None:
    lab = InductionLab(start_time=0.0)
    lab.play()
    t = _run(lab, 3)
    before = lab.state
    result = lab.tick(t)
    assert result.advanced is False
    assert lab.state is before
    assert lab.tick_count == 3


def test_history_sampled_every_fifth_tick() -> None:
    lab = InductionLab(start_time=0.0)
    lab.play()
    t = 0.0
    samples = []
    for _ in range(23):
        t += FRAME_MS
        r = lab.tick(t)
        if r.sample is not None:
            samples.append(r.sample)
    assert len(samples) == 4
    assert lab.history == tuple(samples)


def test_reset_is_atomic() -> None:
    lab = InductionLab(start_time=0.0)
    lab.play()
    t = _run(lab, 40)
    assert len(lab.history) > 0
    lab.reset()
    st = lab.state
    assert st.position == 0.0
    assert not st.is_playing
    assert lab.history == ()
    assert st.emf == 0.0 and st.emf_display == 0.0 and st.velocity == 0.0
    # The next tick starts from rest at the centre
    r = lab.tick(t + FRAME_MS)
    assert r.advanced
    assert r.state.velocity == 0.0


def test_select_source() -> None:
    manual = ManualPosition(10.0)
    osc = OscillatingPosition()
    assert select_source(manual, osc, is_playing=True, is_dragging=False) is osc
    assert select_source(manual, osc, is_playing=True, is_dragging=True) is manual
    assert select_source(manual, osc, is_playing=False, is_dragging=False) is manual
    assert manual.step(time=123.0) == {"position": 10.0}


def test_position_source_requires_resolve() -> None:
    with pytest.raises(TypeError):
        PositionSource(340.0)  # type: ignore[abstract]


def test_oscillator_amplitude_clamped() -> None:
    osc = OscillatingPosition(amplitude=1000.0, speed=1.0, limit=340.0)
    quarter_period_ms = (math.pi / 2) / osc.omega * 1000.0
    assert osc.resolve(quarter_period_ms) == 340.0


def test_config_changes_travel() -> None:
    lab = InductionLab(config=LabConfig(canvas_width=400, magnet_width=100, oscillation_amplitude=120.0))
    assert lab.max_travel == 150.0
    assert lab.drag_to(400.0) == 150.0
