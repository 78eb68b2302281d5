"""Screensaver lifecycle: Idle <-> Running, one frame at a time."""

import random
from enum import Enum, auto
from typing import Callable

from glowbounce import scaler
from glowbounce.frame import FrameDescription, RenderFrameProducer
from glowbounce.motion import MotionSimulator, TextExtent, Vector, Viewport
from glowbounce.palette import Color, Palette
from glowbounce.scheduler import Scheduler

# Rough text size guesses used only to pick the starting position, since
# nothing has been measured before the first frame.
ESTIMATE_WIDTH_FACTOR = 8
ESTIMATE_HEIGHT_FACTOR = 1.2
MARGIN_X = 100
MARGIN_Y = 50

MeasureFn = Callable[[str, float], TextExtent]
EmitFn = Callable[[FrameDescription], None]


class AnimationState(Enum):
    IDLE = auto()
    RUNNING = auto()


class ScreensaverController:
    """Drives motion, palette and frame building under an injected scheduler.

    Motion and palette are private; everything goes through start(), stop(),
    on_resize() and on_frame().
    """

    def __init__(self, scheduler: Scheduler, measure_text: MeasureFn,
                 width: float, height: float, emit: EmitFn,
                 rng=None, palette: Palette | None = None,
                 producer: RenderFrameProducer | None = None):
        self._scheduler = scheduler
        self._measure_text = measure_text
        self._emit = emit
        self._rng = rng or random.Random()
        self._palette = palette or Palette()
        self._producer = producer or RenderFrameProducer()
        self._motion = MotionSimulator()

        self._viewport = Viewport(width, height)
        self._scaling = scaler.compute(width, height)
        self._state = AnimationState.IDLE
        self._text = ""
        self._token: int | None = None

    # --- Read-only views ---

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def text(self) -> str:
        return self._text

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def scaling(self) -> scaler.ScalingParams:
        return self._scaling

    @property
    def position(self) -> Vector:
        return self._motion.position

    @property
    def velocity(self) -> Vector:
        return self._motion.velocity

    @property
    def color_index(self) -> int:
        return self._palette.index

    @property
    def color(self) -> Color:
        return self._palette.current()

    @property
    def token(self) -> int | None:
        return self._token

    # --- Lifecycle ---

    def start(self, text: str) -> None:
        if self._state is AnimationState.RUNNING:
            self.stop()

        self._text = text
        self._scaling = scaler.compute(self._viewport.width, self._viewport.height)
        font_size = self._scaling.font_size

        span_x = max(MARGIN_X, self._viewport.width - font_size * ESTIMATE_WIDTH_FACTOR)
        span_y = max(MARGIN_Y, self._viewport.height - font_size * ESTIMATE_HEIGHT_FACTOR)
        self._motion.reset(self._rng.random() * span_x, self._rng.random() * span_y)
        self._motion.set_speed_scale(self._scaling.speed_multiplier)

        self._state = AnimationState.RUNNING
        self._token = self._scheduler.schedule(self.on_frame)
        print(f"[controller] Started '{text}' at {self._viewport.width}x{self._viewport.height}, "
              f"font {font_size:.1f}px, speed x{self._scaling.speed_multiplier:.2f}")

    def on_frame(self) -> None:
        # A frame that fires after stop() raced it is dropped
        if self._state is not AnimationState.RUNNING:
            return
        self._token = None

        try:
            font_size = self._scaling.font_size
            extent = self._measure_text(self._text, font_size)
            bounce = self._motion.step(self._viewport, extent)
            self._palette.advance_if_bounced(bounce.any)
            frame = self._producer.build(self._motion, extent, self._palette.current(),
                                         font_size, text=self._text)
            self._emit(frame)
        finally:
            # Keep exactly one pending frame while running, even if a collaborator raised
            if self._state is AnimationState.RUNNING and self._token is None:
                self._token = self._scheduler.schedule(self.on_frame)

    def on_resize(self, width: float, height: float) -> None:
        """Takes effect on the next frame. Position is left to the next bounce check."""
        self._viewport = Viewport(width, height)
        if self._state is not AnimationState.RUNNING:
            return
        self._scaling = scaler.compute(width, height)
        self._motion.set_speed_scale(self._scaling.speed_multiplier)
        print(f"[controller] Resized to {width}x{height}, font {self._scaling.font_size:.1f}px")

    def stop(self) -> None:
        if self._token is not None:
            self._scheduler.cancel(self._token)
            self._token = None
        if self._state is AnimationState.IDLE:
            return
        self._state = AnimationState.IDLE
        self._text = ""
        self._palette.reset()
        print("[controller] Stopped")
