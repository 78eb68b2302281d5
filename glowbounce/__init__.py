"""Bouncing, color-cycling, glowing text screensaver."""

from glowbounce.canvas import Canvas
from glowbounce.controller import AnimationState, ScreensaverController
from glowbounce.palette import Palette
from glowbounce.scheduler import FrameScheduler

__all__ = ["AnimationState", "Canvas", "FrameScheduler", "Palette", "ScreensaverController"]
