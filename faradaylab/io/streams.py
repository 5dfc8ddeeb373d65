"""Replay of recorded pointer input against a headless lab."""

from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence

from faradaylab.io.pointer import DragController, PointerEvent

if TYPE_CHECKING:
    from faradaylab.core.system import InductionLab, TickResult


class PointerStream:
    """
    Pre-recorded sequence of PointerEvent, ordered by timestamp.
    """

    def __init__(self, events: Iterable[PointerEvent]) -> None:
        self._events: List[PointerEvent] = sorted(events, key=lambda e: e.timestamp)
        self._index = 0

    def __iter__(self) -> Iterator[PointerEvent]:
        self._index = 0
        return self

    def __next__(self) -> PointerEvent:
        if self._index >= len(self._events):
            raise StopIteration
        event = self._events[self._index]
        self._index += 1
        return event

    def __len__(self) -> int:
        return len(self._events)

    def reset(self) -> None:
        self._index = 0

    @classmethod
    def linear_drag(
        cls,
        start_x: float,
        end_x: float,
        t_start: float,
        t_end: float,
        n_moves: int = 60,
    ) -> "PointerStream":
        """A press at start_x, evenly spaced moves to end_x, then release."""
        events = [PointerEvent("down", start_x, t_start)]
        for i in range(1, n_moves + 1):
            f = i / n_moves
            events.append(PointerEvent("move", start_x + f * (end_x - start_x), t_start + f * (t_end - t_start)))
        events.append(PointerEvent("up", end_x, t_end))
        return cls(events)


def replay(
    lab: "InductionLab",
    stream: PointerStream,
    frame_times: Sequence[float],
    controller: Optional[DragController] = None,
) -> List["TickResult"]:
    """
    Drive ``lab`` through interleaved pointer events and frames.

    Every event with timestamp <= a frame time is delivered before that frame
    ticks. Returns the TickResult of every frame.
    """
    controller = controller or DragController(lab)
    events = list(stream)
    i = 0
    results = []
    for t in frame_times:
        while i < len(events) and events[i].timestamp <= t:
            controller.handle(events[i])
            i += 1
        results.append(lab.tick(t))
    for event in events[i:]:
        controller.handle(event)
    return results
