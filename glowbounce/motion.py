"""Constant-velocity motion with edge reflection."""

from dataclasses import dataclass

BASE_SPEED = 2.0
VERTICAL_RATIO = 0.75  # Vertical drift is slower than horizontal


@dataclass(frozen=True)
class Vector:
    x: float
    y: float


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float


@dataclass(frozen=True)
class TextExtent:
    width: float
    height: float


@dataclass(frozen=True)
class Bounce:
    bounced_x: bool = False
    bounced_y: bool = False

    @property
    def any(self) -> bool:
        return self.bounced_x or self.bounced_y


def _reflect(pos: float, vel: float, size: float, limit: float) -> tuple[float, float, bool]:
    """Resolve one axis. The boundary is inclusive on both sides."""
    if pos <= 0 or pos + size >= limit:
        # Clamp floors at 0 when the text is larger than the viewport
        return max(0.0, min(pos, limit - size)), -vel, True
    return pos, vel, False


class MotionSimulator:
    """Owns position and velocity. One step() per frame, no time delta."""

    def __init__(self, x: float = 50.0, y: float = 50.0, base_speed: float = BASE_SPEED):
        self.base_speed = base_speed
        self._x = float(x)
        self._y = float(y)
        self._vx = base_speed
        self._vy = base_speed * VERTICAL_RATIO

    @property
    def position(self) -> Vector:
        return Vector(self._x, self._y)

    @property
    def velocity(self) -> Vector:
        return Vector(self._vx, self._vy)

    def reset(self, x: float, y: float) -> None:
        """Place the text and point it down-right again."""
        self._x = float(x)
        self._y = float(y)
        self._vx = abs(self._vx) or self.base_speed
        self._vy = abs(self._vy) or self.base_speed * VERTICAL_RATIO

    def set_speed_scale(self, speed_multiplier: float) -> None:
        """Rescale speed, keeping direction. Non-positive components go negative."""
        speed_x = self.base_speed * speed_multiplier
        speed_y = self.base_speed * speed_multiplier * VERTICAL_RATIO
        self._vx = speed_x if self._vx > 0 else -speed_x
        self._vy = speed_y if self._vy > 0 else -speed_y

    def step(self, viewport: Viewport, extent: TextExtent) -> Bounce:
        self._x += self._vx
        self._y += self._vy

        self._x, self._vx, bounced_x = _reflect(self._x, self._vx, extent.width, viewport.width)
        self._y, self._vy, bounced_y = _reflect(self._y, self._vy, extent.height, viewport.height)

        return Bounce(bounced_x, bounced_y)
