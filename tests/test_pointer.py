"""Tests for pointer mapping, drag capture and recorded replay."""

import numpy as np
import pytest

from faradaylab import InductionLab
from faradaylab.io import DragController, PointerEvent, PointerStream, Surface, replay

FRAME_MS = 1000.0 / 60.0


def test_surface_mapping() -> None:
    s = Surface(left=100.0, width=400.0, view_width=800.0)
    assert s.to_sim(100.0) == -400.0
    assert s.to_sim(300.0) == 0.0
    assert s.to_sim(500.0) == 400.0
    assert s.to_client(s.to_sim(237.0)) == pytest.approx(237.0)


def test_press_away_from_magnet_only_pauses() -> None:
    lab = InductionLab(start_time=0.0)
    lab.play()
    ctrl = DragController(lab, Surface())
    assert ctrl.pointer_down(10.0) is False  # far left edge, magnet at centre
    assert not lab.state.is_playing
    assert not lab.state.is_dragging
    assert ctrl.pointer_move(200.0) is None
    assert lab.state.position == 0.0


def test_drag_keeps_grab_offset() -> None:
    lab = InductionLab(start_time=0.0)
    ctrl = DragController(lab, Surface())
    assert ctrl.pointer_down(420.0)  # grabbed 20 px right of the magnet centre
    assert lab.state.is_dragging
    assert ctrl.pointer_move(520.0) == pytest.approx(100.0)
    assert lab.state.position == pytest.approx(100.0)


def test_capture_tracks_outside_surface() -> None:
    lab = InductionLab(start_time=0.0)
    ctrl = DragController(lab, Surface(left=50.0))
    ctrl.pointer_down(450.0)
    # Pointer well beyond the right edge of the surface: still tracked, clamped
    assert ctrl.pointer_move(5000.0) == lab.max_travel
    assert ctrl.pointer_move(-5000.0) == -lab.max_travel
    ctrl.pointer_up()
    assert not ctrl.captured
    assert not lab.state.is_dragging
    assert ctrl.pointer_move(400.0) is None
    assert lab.state.position == -lab.max_travel


def test_drag_interrupts_auto_play_for_good() -> None:
    lab = InductionLab(start_time=0.0)
    lab.play()
    ctrl = DragController(lab)
    ctrl.handle(PointerEvent("down", 400.0))
    ctrl.handle(PointerEvent("move", 430.0))
    ctrl.handle(PointerEvent("up", 430.0))
    assert not lab.state.is_playing
    assert lab.state.position == pytest.approx(30.0)


def test_unknown_event_kind() -> None:
    with pytest.raises(ValueError):
        PointerEvent("wheel", 0.0)


def test_pointer_stream_sorted_and_resettable() -> None:
    stream = PointerStream([PointerEvent("up", 3.0, 30.0), PointerEvent("down", 1.0, 10.0)])
    assert [e.kind for e in stream] == ["down", "up"]
    assert len(stream) == 2
    assert [e.kind for e in stream] == ["down", "up"]


def test_replay_linear_drag_produces_emf() -> None:
    lab = InductionLab(start_time=0.0)
    # Drag from the centre (client 400) to sim -200 over one second
    stream = PointerStream.linear_drag(400.0, 200.0, t_start=0.0, t_end=1000.0, n_moves=60)
    frames = np.arange(1, 80) * FRAME_MS
    results = replay(lab, stream, frames)
    assert len(results) == len(frames)
    assert lab.state.position == pytest.approx(-200.0)
    assert not lab.state.is_dragging
    emfs = [r.state.emf for r in results if r.advanced]
    # Moving away from the coil to the left: flux falls, EMF positive
    assert max(emfs) > 0
    assert min(emfs) >= -1e-9


def test_reset_mid_drag_releases_capture() -> None:
    lab = InductionLab(start_time=0.0)
    ctrl = DragController(lab)
    assert ctrl.pointer_down(400.0)
    assert ctrl.captured
    lab.reset()
    assert not ctrl.captured
    lab.play()
    assert lab.state.is_playing
    # Pointer still held after the reset: moves no longer steer the magnet
    assert ctrl.pointer_move(500.0) is None
    assert lab.state.position == 0.0
    assert not (ctrl.captured and lab.state.is_playing)
    ctrl.pointer_up()
    assert lab.state.is_playing
    assert not lab.state.is_dragging
