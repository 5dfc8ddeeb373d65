"""Presentation sinks: gauge, chart, readouts. They only read lab snapshots."""

from faradaylab.display.gauge import draw_gauge, gauge_reading, needle_angle, tick_angles
from faradaylab.display.chart import chart_series, plot_history
from faradaylab.display.readouts import direction_of, format_readouts, readout_text

__all__ = [
    "needle_angle",
    "gauge_reading",
    "tick_angles",
    "draw_gauge",
    "chart_series",
    "plot_history",
    "format_readouts",
    "readout_text",
    "direction_of",
]
