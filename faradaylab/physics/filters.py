"""
Exponential smoothing for noisy derived quantities (velocity, EMF).

Pure numerical level: y_n = alpha * y_{n-1} + (1 - alpha) * x_n,
alpha is the weight of the previous value (alpha = 0 means no smoothing).
"""


def smooth(previous: float, raw: float, alpha: float) -> float:
    """One step of the single-pole low-pass filter."""
    return previous * alpha + raw * (1.0 - alpha)
