"""Save and load lab configurations; convert snapshots to plain data."""

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

import numpy as np

from faradaylab.core.config import LabConfig


def to_plain(obj: Any) -> Any:
    """Recursively convert numpy values and dataclasses to JSON-ready types."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return to_plain(asdict(obj))
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, dict):
        return {k: to_plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_plain(x) for x in obj]
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.bool_):
        return bool(obj)
    return obj


def save_config(config: Dict[str, Any], path: Union[str, Path]) -> None:
    """
    Save a configuration (dict) to JSON.
    Numpy values are converted to plain Python types.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_plain(config), f, indent=2, ensure_ascii=False)


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a configuration from JSON."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_lab_config(config: LabConfig, path: Union[str, Path]) -> None:
    save_config(config.to_dict(), path)


def load_lab_config(path: Union[str, Path]) -> LabConfig:
    """Load a LabConfig; missing keys keep their defaults, unknown keys raise ValueError."""
    return LabConfig.from_dict(load_config(path))


def snapshot_to_dict(state: Any, history: Optional[Iterable[Any]] = None) -> Dict[str, Any]:
    """
    Plain-dict view of a SimulationState (and optionally the history samples),
    e.g. for printing or logging a tutor request.
    """
    data: Dict[str, Any] = to_plain(state)
    if history is not None:
        data["history"] = [to_plain(s) for s in history]
    return data
