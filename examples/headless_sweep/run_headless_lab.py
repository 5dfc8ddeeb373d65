"""
Headless run of the induction lab on the asyncio frame driver.

Two scenarios:
- auto: the magnet oscillates through the coil for a few seconds.
- drag: a recorded drag (centre -> left edge -> right edge) is replayed frame by frame.

Prints readouts once per second and optionally saves the flux/EMF chart.
With --explain, asks the tutor about the final state (needs GEMINI_API_KEY).
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from faradaylab import FrameDriver, InductionLab, TickResult
from faradaylab.display import format_readouts, gauge_reading, needle_angle
from faradaylab.io import PointerEvent, PointerStream, Surface, replay, snapshot_to_dict

FRAME_MS = 1000.0 / 60.0


def print_readouts(result: TickResult) -> None:
    st = result.state
    r = format_readouts(st)
    print(
        f"  t={st.time / 1000:5.2f}s  x={r['position']:>5}  v={r['velocity']:>8}  "
        f"flux={st.flux:6.1f}  emf={r['emf']:>11}  needle={needle_angle(gauge_reading(st)):6.1f} deg"
    )


async def run_auto(lab: InductionLab, seconds: float, speed: float) -> None:
    lab.set_speed(speed)
    lab.play()

    class SimClock:
        """Frame clock decoupled from wall time, so the run is reproducible."""

        def __init__(self) -> None:
            self.now = 0.0

        def __call__(self) -> float:
            self.now += FRAME_MS
            return self.now

    every_second = {"n": 0}

    def report(result: TickResult) -> None:
        every_second["n"] += 1
        if every_second["n"] % 60 == 0:
            print_readouts(result)

    driver = FrameDriver(lab, fps=240.0, clock=SimClock())
    driver.add_sink(report)
    await driver.run(max_frames=int(seconds * 60))


def run_drag(lab: InductionLab) -> None:
    surface = Surface()
    centre = surface.to_client(0.0)
    left = surface.to_client(-lab.max_travel)
    right = surface.to_client(lab.max_travel)
    events = list(PointerStream.linear_drag(centre, left, 0.0, 1000.0))
    events += [PointerEvent(e.kind, e.client_x, e.timestamp + 1500.0)
               for e in PointerStream.linear_drag(left, right, 0.0, 2000.0)]
    frames = np.arange(1, int(4000 / FRAME_MS)) * FRAME_MS
    results = replay(lab, PointerStream(events), frames)
    for res in results[59::60]:
        print_readouts(res)


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless Faraday induction lab")
    parser.add_argument("--mode", default="auto", choices=["auto", "drag"])
    parser.add_argument("--seconds", type=float, default=5.0, help="Duration of the auto run")
    parser.add_argument("--speed", type=float, default=1.0, help="Oscillation speed (0.5-3)")
    parser.add_argument("--turns", type=int, default=5, help="Coil turns (1-20)")
    parser.add_argument("--plot", type=Path, default=None, help="Save the flux/EMF chart to this file")
    parser.add_argument("--explain", action="store_true", help="Ask the tutor about the final state")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    lab = InductionLab(start_time=0.0, turns=args.turns)
    print(f"Running '{args.mode}' scenario, turns={lab.state.turns}")
    if args.mode == "auto":
        asyncio.run(run_auto(lab, args.seconds, args.speed))
    else:
        run_drag(lab)

    final = snapshot_to_dict(lab.snapshot())
    print(f"Ticks: {lab.tick_count}, history samples: {len(lab.history)}")
    print(f"Final state: {final}")

    if args.plot is not None:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from faradaylab.display import plot_history

        ax, _ = plot_history(lab.history)
        ax.figure.tight_layout()
        ax.figure.savefig(args.plot, dpi=120)
        plt.close(ax.figure)
        print(f"Saved {args.plot}")

    if args.explain:
        from faradaylab.tutor import ExplanationRequest, ExplanationService

        text = asyncio.run(ExplanationService().explain(ExplanationRequest.from_state(lab.snapshot())))
        print(f"Tutor: {text}")


if __name__ == "__main__":
    main()
