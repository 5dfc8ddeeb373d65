"""Pointer input, recorded replay and serialization."""

from faradaylab.io.pointer import DragController, PointerEvent, Surface
from faradaylab.io.streams import PointerStream, replay
from faradaylab.io.serializers import (
    load_config,
    load_lab_config,
    save_config,
    save_lab_config,
    snapshot_to_dict,
)

__all__ = [
    "PointerEvent",
    "Surface",
    "DragController",
    "PointerStream",
    "replay",
    "save_config",
    "load_config",
    "save_lab_config",
    "load_lab_config",
    "snapshot_to_dict",
]
