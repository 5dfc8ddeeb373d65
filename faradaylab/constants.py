"""
Physical and visual constants of the induction lab.

Single source of truth for the defaults gathered in LabConfig. Lengths are in
view units (px of an 800 x 400 view box), times in milliseconds unless stated.
"""

# --- View geometry ---
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 400
MAGNET_WIDTH = 120
MAGNET_HEIGHT = 40
COIL_RADIUS = 60

# --- Flux model: Gaussian bump centred on the coil ---
FLUX_SCALE = 100.0   # peak flux (arbitrary Wb)
FLUX_WIDTH = 150.0   # Gaussian width parameter (px)

# --- Smoothing (single-pole low-pass, weight of the previous value) ---
VELOCITY_SMOOTHING = 0.5
EMF_SMOOTHING = 0.8

# --- History ---
HISTORY_MAX = 50     # samples kept for the chart
HISTORY_EVERY = 5    # one sample every N accepted ticks

# --- Auto-oscillation ---
OSCILLATION_AMPLITUDE = 300.0

# --- Controls ---
DEFAULT_TURNS = 5
DEFAULT_SPEED = 1.0

# --- Gauge ---
MAX_NEEDLE_DEFLECTION = 80.0  # degrees
GAUGE_INPUT_LIMIT = 100.0
GAUGE_DISPLAY_SCALE = 10.0    # EMF -> gauge reading (mV)

# --- Pointer ---
DRAG_HIT_MARGIN = 50.0

# --- Frame driver ---
DEFAULT_FPS = 60.0
