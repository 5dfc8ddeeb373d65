"""
Frame driver: a cooperative asyncio loop that ticks the lab at a target frame rate.

Each iteration reads the clock, runs one lab tick to completion, hands the
snapshot to the sinks and only then yields. stop() cancels the pending frame,
so no tick can run after teardown.
"""

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional

from faradaylab.constants import DEFAULT_FPS

if TYPE_CHECKING:
    from faradaylab.core.system import InductionLab, TickResult

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sink = Callable[["TickResult"], None]


def perf_clock_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.perf_counter() * 1000.0


class FrameDriver:
    """
    Drives an InductionLab from an asyncio event loop.

    Sinks are called with every TickResult (advanced or not); a failing sink
    is logged and skipped, the loop keeps running.
    """

    def __init__(
        self,
        lab: "InductionLab",
        fps: float = DEFAULT_FPS,
        clock: Optional[Clock] = None,
        sinks: Iterable[Sink] = (),
    ) -> None:
        """
        Args:
            lab: lab to tick
            fps: target frame rate (frames per second)
            clock: callable returning the current time in ms (default: perf_counter)
            sinks: callables receiving each TickResult
        """
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.lab = lab
        self.fps = float(fps)
        self.clock = clock or perf_clock_ms
        self.sinks: List[Sink] = list(sinks)
        self._task: Optional["asyncio.Task[int]"] = None
        self._frames = 0

    @property
    def frame_interval(self) -> float:
        """Seconds between frames."""
        return 1.0 / self.fps

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def frames(self) -> int:
        """Frames executed so far (including no-op ticks)."""
        return self._frames

    def add_sink(self, sink: Sink) -> None:
        self.sinks.append(sink)

    def frame(self) -> "TickResult":
        """Run a single frame synchronously."""
        result = self.lab.tick(self.clock())
        self._frames += 1
        for sink in self.sinks:
            try:
                sink(result)
            except Exception:
                logger.warning("Sink %r failed", sink, exc_info=True)
        return result

    async def run(self, max_frames: Optional[int] = None) -> int:
        """
        Tick until cancelled or ``max_frames`` frames have run.

        Returns:
            Number of frames executed by this call.
        """
        done = 0
        logger.info("Frame driver started at %.1f fps", self.fps)
        try:
            while max_frames is None or done < max_frames:
                self.frame()
                done += 1
                await asyncio.sleep(self.frame_interval)
        finally:
            logger.info("Frame driver stopped after %d frames", done)
        return done

    def start(self, max_frames: Optional[int] = None) -> "asyncio.Task[int]":
        """Schedule run() as a task on the running loop."""
        if self.running:
            raise RuntimeError("Frame driver already running")
        self._task = asyncio.get_running_loop().create_task(self.run(max_frames))
        return self._task

    async def stop(self) -> None:
        """Cancel the pending frame and wait until the loop has exited."""
        task = self._task
        if task is None:
            return
        self._task = None
        if not task.done():
            task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
