"""
Interactive induction lab in a matplotlib window.

Drag the magnet with the mouse (the drag keeps tracking outside the view until
release), or press Auto-Move. Sliders set coil turns and oscillation speed;
Reset centres the magnet and clears the chart.
"""

import logging
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

try:
    import matplotlib.pyplot as plt
    from matplotlib.animation import FuncAnimation
    from matplotlib.patches import Rectangle
    from matplotlib.widgets import Button, Slider
except ImportError:
    print("This example requires matplotlib: pip install matplotlib")
    sys.exit(1)

from faradaylab import InductionLab
from faradaylab.constants import CANVAS_HEIGHT, CANVAS_WIDTH, COIL_RADIUS, MAGNET_HEIGHT, MAGNET_WIDTH
from faradaylab.core.signals import SPEED_CONTROL, TURNS_CONTROL
from faradaylab.display import direction_of, draw_gauge, gauge_reading, plot_history, readout_text
from faradaylab.io import DragController, Surface
from faradaylab.simulation import perf_clock_ms

CHART_EVERY = 5
DIRECTION_COLORS = {"forward": "#16a34a", "backward": "#dc2626", "still": "0.8"}


def coil_x_offsets(turns: int) -> np.ndarray:
    """Loop positions: the coil gets wider with more turns."""
    width = 20 + turns * 8
    if turns == 1:
        return np.array([0.0])
    return np.linspace(-width / 2, width / 2, turns)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    lab = InductionLab(start_time=perf_clock_ms())

    fig = plt.figure(figsize=(12, 7))
    fig.canvas.manager.set_window_title("Faraday's Law Simulation")
    view_ax = fig.add_axes([0.04, 0.45, 0.62, 0.5])
    gauge_ax = fig.add_axes([0.70, 0.55, 0.28, 0.4])
    chart_ax = fig.add_axes([0.06, 0.08, 0.58, 0.3])
    emf_ax = chart_ax.twinx()
    turns_ax = fig.add_axes([0.74, 0.40, 0.2, 0.03])
    speed_ax = fig.add_axes([0.74, 0.33, 0.2, 0.03])
    play_ax = fig.add_axes([0.74, 0.20, 0.1, 0.06])
    reset_ax = fig.add_axes([0.86, 0.20, 0.08, 0.06])

    view_ax.set_xlim(-CANVAS_WIDTH / 2, CANVAS_WIDTH / 2)
    view_ax.set_ylim(-CANVAS_HEIGHT / 2, CANVAS_HEIGHT / 2)
    view_ax.set_facecolor("#0f172a")
    view_ax.set_xticks([])
    view_ax.set_yticks([])
    view_ax.text(-390, 180, "Drag magnet left/right", color="0.7", fontsize=9)

    south = Rectangle((-MAGNET_WIDTH / 2, -MAGNET_HEIGHT / 2), MAGNET_WIDTH / 2, MAGNET_HEIGHT, color="#ef4444", zorder=2)
    north = Rectangle((0, -MAGNET_HEIGHT / 2), MAGNET_WIDTH / 2, MAGNET_HEIGHT, color="#3b82f6", zorder=2)
    view_ax.add_patch(south)
    view_ax.add_patch(north)
    coil_lines = []
    readout = view_ax.text(250, -185, "", color="white", family="monospace", fontsize=9)

    def draw_coil() -> None:
        for line in coil_lines:
            line.remove()
        coil_lines.clear()
        for dx in coil_x_offsets(lab.state.turns):
            coil_lines.append(view_ax.plot([dx, dx], [-COIL_RADIUS, COIL_RADIUS], color="#f59e0b", lw=3, zorder=3)[0])

    draw_coil()

    turns_slider = Slider(turns_ax, "Turns", TURNS_CONTROL.minimum, TURNS_CONTROL.maximum,
                          valinit=lab.state.turns, valstep=TURNS_CONTROL.values())
    speed_slider = Slider(speed_ax, "Speed", SPEED_CONTROL.minimum, SPEED_CONTROL.maximum,
                          valinit=lab.state.speed, valstep=SPEED_CONTROL.values())
    play_button = Button(play_ax, "Auto-Move")
    reset_button = Button(reset_ax, "Reset")

    def on_turns(value: float) -> None:
        lab.set_turns(value)
        draw_coil()

    def on_play(_event) -> None:
        playing = lab.toggle_play()
        play_button.label.set_text("Pause" if playing else "Auto-Move")

    def on_reset(_event) -> None:
        lab.reset()
        play_button.label.set_text("Auto-Move")

    turns_slider.on_changed(on_turns)
    speed_slider.on_changed(lab.set_speed)
    play_button.on_clicked(on_play)
    reset_button.on_clicked(on_reset)

    def surface() -> Surface:
        box = view_ax.bbox
        return Surface(left=box.x0, width=box.width, view_width=CANVAS_WIDTH)

    drag = DragController(lab, surface())

    def on_press(event) -> None:
        if event.inaxes is not view_ax:
            return
        drag.surface = surface()
        drag.pointer_down(event.x)
        play_button.label.set_text("Auto-Move")

    def on_move(event) -> None:
        # display coordinates keep working outside the axes while captured
        drag.pointer_move(event.x)

    def on_release(_event) -> None:
        drag.pointer_up()

    fig.canvas.mpl_connect("button_press_event", on_press)
    fig.canvas.mpl_connect("motion_notify_event", on_move)
    fig.canvas.mpl_connect("button_release_event", on_release)

    frame_count = {"n": 0}

    def update(_frame):
        result = lab.tick(perf_clock_ms())
        st = result.state
        south.set_x(st.position - MAGNET_WIDTH / 2)
        north.set_x(st.position)
        readout.set_text(readout_text(st))
        readout.set_color(DIRECTION_COLORS[direction_of(st.velocity)])
        draw_gauge(gauge_reading(st), ax=gauge_ax)
        frame_count["n"] += 1
        if frame_count["n"] % CHART_EVERY == 0:
            plot_history(lab.history, ax=chart_ax, emf_ax=emf_ax)
        return []

    _anim = FuncAnimation(fig, update, interval=16, cache_frame_data=False)  # keep a reference
    plt.show()


if __name__ == "__main__":
    main()
