"""RGB pixel buffer that measures and draws glowing text."""

import math
from functools import lru_cache

import numpy as np
from PIL import Image, ImageDraw, ImageFilter, ImageFont

from glowbounce.frame import FrameDescription
from glowbounce.motion import TextExtent
from glowbounce.palette import Color


@lru_cache(maxsize=32)
def load_font(font_path: str | None, size: int) -> ImageFont.FreeTypeFont:
    """Load a font once per (path, pixel size). No path means Pillow's bundled font."""
    if font_path:
        return ImageFont.truetype(font_path, size)
    return ImageFont.load_default(size=size)


class Canvas:
    """RGB pixel buffer with text measurement and glow drawing.

    Pixels live in a (height, width, 3) uint8 array, row-major, so
    pixel (x, y) is pixels[y, x].
    """

    def __init__(self, width: int = 1280, height: int = 720, font_path: str | None = None):
        self.font_path = font_path or None
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Reallocate the buffer. Contents are dropped; the next frame repaints."""
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self.pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def clear(self, color: Color = (0, 0, 0)) -> None:
        """Fill entire canvas with a color (default black)."""
        self.pixels[:, :] = color

    def font(self, font_size: float) -> ImageFont.FreeTypeFont:
        return load_font(self.font_path, max(1, round(font_size)))

    def measure_text(self, text: str, font_size: float) -> TextExtent:
        """Advance width of the string; height is the font size (top baseline)."""
        # Height stays the unrounded font size even though glyphs load at round(font_size)
        return TextExtent(self.font(font_size).getlength(text), font_size)

    def draw_frame(self, frame: FrameDescription) -> None:
        """Paint the background, then each glow layer back-to-front."""
        self.clear(frame.background)
        font = self.font(frame.font_size)
        for layer in frame.layers:
            self._draw_layer(frame.text, frame.position.x, frame.position.y,
                             font, layer.blur_radius, layer.color)

    def _draw_layer(self, text: str, x: float, y: float, font: ImageFont.FreeTypeFont,
                    blur: float, color: Color) -> None:
        left, top, right, bottom = font.getbbox(text)
        pad = math.ceil(blur * 1.5)
        x0 = math.floor(x + left) - pad
        y0 = math.floor(y + top) - pad
        x1 = math.ceil(x + right) + pad
        y1 = math.ceil(y + bottom) + pad
        if x1 <= x0 or y1 <= y0:
            return

        # Clip to the canvas; text is allowed to hang off the edge
        cx0, cy0 = max(0, x0), max(0, y0)
        cx1, cy1 = min(self.width, x1), min(self.height, y1)
        if cx1 <= cx0 or cy1 <= cy0:
            return

        mask = Image.new("L", (x1 - x0, y1 - y0), 0)
        ImageDraw.Draw(mask).text((x - x0, y - y0), text, fill=255, font=font)
        if blur > 0:
            mask = mask.filter(ImageFilter.GaussianBlur(blur / 2))
        mask = mask.crop((cx0 - x0, cy0 - y0, cx1 - x0, cy1 - y0))

        alpha = np.asarray(mask, dtype=np.float32)[..., None] / 255.0
        region = self.pixels[cy0:cy1, cx0:cx1].astype(np.float32)
        blended = region * (1.0 - alpha) + np.array(color, dtype=np.float32) * alpha
        self.pixels[cy0:cy1, cx0:cx1] = np.rint(blended).astype(np.uint8)

    def get_buffer(self) -> bytes:
        """Get the entire pixel buffer as bytes (RGB888)."""
        return self.pixels.tobytes()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels, "RGB")
