"""Verify that main modules are importable."""

import pytest


def test_import_faradaylab() -> None:
    import faradaylab
    assert faradaylab.__version__ == "0.1.0"


def test_import_core() -> None:
    from faradaylab.core import InductionLab, InductionHistory, LabComponent, LabConfig, SignalSpec
    assert InductionLab is not None
    assert InductionHistory is not None
    assert LabComponent is not None
    assert LabConfig is not None
    assert SignalSpec is not None


def test_import_physics() -> None:
    from faradaylab.physics import PhysicsCore, emf, flux, physics_step, smooth
    assert PhysicsCore is not None
    assert callable(physics_step)
    assert callable(flux) and callable(emf) and callable(smooth)


def test_import_simulation() -> None:
    from faradaylab.simulation import FrameDriver, ManualPosition, OscillatingPosition
    assert FrameDriver is not None
    assert ManualPosition is not None
    assert OscillatingPosition is not None


def test_import_io() -> None:
    from faradaylab.io import DragController, PointerStream, load_config, save_config
    assert DragController is not None
    assert PointerStream is not None
    assert save_config is not None
    assert load_config is not None


def test_import_display() -> None:
    from faradaylab.display import format_readouts, needle_angle, plot_history
    assert callable(needle_angle)
    assert callable(plot_history)
    assert callable(format_readouts)


def test_import_tutor() -> None:
    pytest.importorskip("aiohttp")
    from faradaylab.tutor import ExplanationService, TutorPanel
    assert ExplanationService is not None
    assert TutorPanel is not None


def test_control_spec_clamp() -> None:
    from faradaylab.core.signals import SPEED_CONTROL, TURNS_CONTROL
    assert TURNS_CONTROL.clamp(0) == 1
    assert TURNS_CONTROL.clamp(25) == 20
    assert TURNS_CONTROL.clamp(7.4) == 7
    assert SPEED_CONTROL.clamp(1.3) == 1.5
    assert SPEED_CONTROL.clamp(10) == 3.0
    assert SPEED_CONTROL.values() == [0.5, 1.0, 1.5, 2.0, 2.5, 3.0]
