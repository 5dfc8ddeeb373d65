"""Bounded in-memory history of (time, flux, emf) samples for the chart."""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from faradaylab.constants import HISTORY_MAX

SERIES = ("time", "flux", "emf")


@dataclass(frozen=True)
class HistorySample:
    """One chart point: time in seconds, flux and emf, each rounded to 0.1."""

    time: float
    flux: float
    emf: float

    @classmethod
    def from_tick(cls, time_ms: float, flux: float, emf: float) -> "HistorySample":
        return cls(
            time=round(time_ms / 1000.0, 1),
            flux=round(float(flux), 1),
            emf=round(float(emf), 1) + 0.0,
        )


class InductionHistory:
    """
    Sliding window over the most recent samples.

    Appending past ``max_length`` evicts the oldest sample. Samples must arrive
    in non-decreasing time order.
    """

    def __init__(self, max_length: Optional[int] = HISTORY_MAX) -> None:
        """
        Args:
            max_length: number of samples to keep (None = unbounded).
        """
        if max_length is not None and max_length < 1:
            raise ValueError("max_length must be >= 1 or None")
        self._max_length = max_length
        self._samples: List[HistorySample] = []

    @property
    def max_length(self) -> Optional[int]:
        return self._max_length

    def append(self, sample: HistorySample) -> None:
        """Add a sample, evicting the oldest one past the bound."""
        if self._samples and sample.time < self._samples[-1].time:
            raise ValueError(
                f"Out-of-order sample: t={sample.time} after t={self._samples[-1].time}"
            )
        self._samples.append(sample)
        if self._max_length is not None and len(self._samples) > self._max_length:
            self._samples = self._samples[-self._max_length:]

    def clear(self) -> None:
        """Drop every sample."""
        self._samples.clear()

    def get(self, key: str) -> np.ndarray:
        """Series for one key ('time', 'flux' or 'emf') as a numpy array."""
        if key not in SERIES:
            return np.array([])
        return np.array([getattr(s, key) for s in self._samples], dtype=float)

    def to_dict(self) -> Dict[str, np.ndarray]:
        """All series as a dict of arrays."""
        return {k: self.get(k) for k in SERIES}

    @property
    def samples(self) -> Tuple[HistorySample, ...]:
        return tuple(self._samples)

    @property
    def latest(self) -> Optional[HistorySample]:
        return self._samples[-1] if self._samples else None

    def __iter__(self) -> Iterator[HistorySample]:
        return iter(tuple(self._samples))

    def __len__(self) -> int:
        return len(self._samples)
