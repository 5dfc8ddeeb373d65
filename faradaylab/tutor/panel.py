"""On-demand tutor: fires explanation requests without blocking the frame loop."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Optional

from faradaylab.tutor.explain import ExplanationRequest, ExplanationService

if TYPE_CHECKING:
    from faradaylab.core.system import InductionLab

logger = logging.getLogger(__name__)


class TutorPanel:
    """
    Holds the current explanation and the loading flag.

    ask() snapshots the lab and schedules the request as a separate task on
    the running loop; the frame driver keeps ticking while it is pending.
    """

    def __init__(
        self,
        lab: "InductionLab",
        service: Optional[ExplanationService] = None,
        session: Optional[Any] = None,
    ) -> None:
        self.lab = lab
        self.service = service or ExplanationService()
        self.session = session
        self.explanation: Optional[str] = None
        self.last_request: Optional[ExplanationRequest] = None
        self._task: Optional["asyncio.Task[str]"] = None

    @property
    def loading(self) -> bool:
        return self._task is not None and not self._task.done()

    def ask(self) -> "asyncio.Task[str]":
        """Request an explanation of the current state. Returns the pending task."""
        if self.loading:
            return self._task
        request = ExplanationRequest.from_state(self.lab.snapshot())
        self.last_request = request
        self._task = asyncio.get_running_loop().create_task(self._fetch(request))
        return self._task

    async def _fetch(self, request: ExplanationRequest) -> str:
        text = await self.service.explain(request, session=self.session)
        self.explanation = text
        logger.debug("Explanation ready (%d chars)", len(text))
        return text

    def clear(self) -> None:
        self.explanation = None

    async def close(self) -> None:
        """Cancel a pending request."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
