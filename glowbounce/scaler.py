"""Viewport-responsive font size and speed scaling."""

from dataclasses import dataclass

MIN_FONT_SIZE = 40
MAX_FONT_SIZE = 360
MIN_SPEED = 0.5
MAX_SPEED = 3
REFERENCE_DIMENSION = 800  # Viewport edge at which speed scale is 1x


@dataclass(frozen=True)
class ScalingParams:
    font_size: float
    speed_multiplier: float


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def compute(width: float, height: float) -> ScalingParams:
    """Scale font size off the short edge and speed off the long edge.

    Screens whose short edge is over 800px get a 2x font boost. Zero or
    negative dimensions land on the minimums.
    """
    min_dim = min(width, height)
    max_dim = max(width, height)

    base = min_dim * 0.08
    if min_dim > REFERENCE_DIMENSION:
        base = min_dim * 0.16

    return ScalingParams(
        font_size=_clamp(base, MIN_FONT_SIZE, MAX_FONT_SIZE),
        speed_multiplier=_clamp(max_dim / REFERENCE_DIMENSION, MIN_SPEED, MAX_SPEED),
    )
