"""
Pointer (mouse / touch) input mapped onto the magnet position.

A press near the magnet captures the pointer; moves are then tracked even
outside the surface bounds until release.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from faradaylab.constants import CANVAS_WIDTH, DRAG_HIT_MARGIN, MAGNET_WIDTH

if TYPE_CHECKING:
    from faradaylab.core.system import InductionLab

logger = logging.getLogger(__name__)

POINTER_KINDS = ("down", "move", "up")


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event in client coordinates."""

    kind: str
    client_x: float
    timestamp: float = 0.0

    def __post_init__(self) -> None:
        if self.kind not in POINTER_KINDS:
            raise ValueError(f"Unknown pointer event kind: {self.kind!r}")


@dataclass(frozen=True)
class Surface:
    """
    Placement of the rendered view on screen.

    Args:
        left: client x of the surface's left edge
        width: rendered width in client units
        view_width: width of the view box in simulation units
    """

    left: float = 0.0
    width: float = CANVAS_WIDTH
    view_width: float = CANVAS_WIDTH

    def to_view(self, client_x: float) -> float:
        return (client_x - self.left) * self.view_width / self.width

    def to_sim(self, client_x: float) -> float:
        """Client x -> simulation x (0 at the coil centre)."""
        return self.to_view(client_x) - self.view_width / 2

    def to_client(self, sim_x: float) -> float:
        return (sim_x + self.view_width / 2) * self.width / self.view_width + self.left


class DragController:
    """Translates pointer events into lab drag calls."""

    def __init__(
        self,
        lab: "InductionLab",
        surface: Optional[Surface] = None,
        magnet_width: float = MAGNET_WIDTH,
        hit_margin: float = DRAG_HIT_MARGIN,
    ) -> None:
        self.lab = lab
        self.surface = surface or Surface()
        self.hit_radius = magnet_width / 2 + hit_margin
        self._offset = 0.0
        self._captured = False

    @property
    def captured(self) -> bool:
        """True while this controller holds a drag the lab still considers active."""
        return self._captured and self.lab.state.is_dragging

    def hits_magnet(self, client_x: float) -> bool:
        return abs(self.surface.to_sim(client_x) - self.lab.state.position) < self.hit_radius

    def pointer_down(self, client_x: float) -> bool:
        """
        Press on the surface. Always interrupts auto-play; starts a drag when
        the press lands on the magnet. Returns True if the pointer was captured.
        """
        self.lab.pause()
        if not self.hits_magnet(client_x):
            return False
        self._offset = self.surface.to_sim(client_x) - self.lab.state.position
        self._captured = True
        self.lab.begin_drag()
        return True

    def pointer_move(self, client_x: float) -> Optional[float]:
        """Move while captured; returns the new magnet position or None."""
        if not self.captured:
            # the lab ended the drag on its own (reset), drop the stale capture
            self._captured = False
            return None
        return self.lab.drag_to(self.surface.to_sim(client_x) - self._offset)

    def pointer_up(self) -> None:
        active = self.captured
        self._captured = False
        if active:
            self.lab.end_drag()

    def handle(self, event: PointerEvent) -> None:
        """Dispatch one PointerEvent."""
        if event.kind == "down":
            self.pointer_down(event.client_x)
        elif event.kind == "move":
            self.pointer_move(event.client_x)
        else:
            self.pointer_up()
