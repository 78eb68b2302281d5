"""Frame descriptions: where to draw the text and how to fake the bloom."""

from dataclasses import dataclass

from glowbounce.motion import TextExtent, Vector
from glowbounce.palette import Color

BACKGROUND: Color = (0, 0, 0)


@dataclass(frozen=True)
class GlowLayer:
    blur_radius: float
    color: Color


@dataclass(frozen=True)
class FrameDescription:
    """Everything the rendering surface needs for one frame.

    Layers are drawn back-to-front at the same position. They differ only in
    blur radius, so overdrawing them reads as a glow.
    """
    text: str
    position: Vector
    extent: TextExtent
    font_size: float
    layers: tuple[GlowLayer, ...]
    background: Color = BACKGROUND


class RenderFrameProducer:
    """Builds frame descriptions. Never draws."""

    def build(self, motion, extent: TextExtent, color: Color, font_size: float,
              text: str = "") -> FrameDescription:
        glow = font_size / 3
        layers = (
            GlowLayer(glow, color),      # outer
            GlowLayer(glow / 2, color),  # mid
            GlowLayer(0, color),         # core
        )
        return FrameDescription(
            text=text,
            position=motion.position,
            extent=extent,
            font_size=font_size,
            layers=layers,
        )
