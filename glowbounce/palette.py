"""Cyclic color palette, advanced once per bounce."""

# Type alias for RGB tuples
Color = tuple[int, int, int]

DEFAULT_COLORS = (
    "#FF0000", "#00FF00", "#0000FF", "#FFFF00",
    "#FF00FF", "#00FFFF", "#FFA500", "#FF69B4",
)


def hex_color(value: str) -> Color:
    """Convert '#RRGGBB' to an (R, G, B) tuple."""
    digits = value.lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected #RRGGBB, got {value!r}")
    color = int(digits, 16)
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


class Palette:
    """Fixed, ordered color cycle. The index always stays in range."""

    def __init__(self, colors=DEFAULT_COLORS):
        parsed = tuple(hex_color(c) if isinstance(c, str) else tuple(c) for c in colors)
        if not parsed:
            raise ValueError("Palette needs at least one color")
        self._colors = parsed
        self._index = 0

    def __len__(self) -> int:
        return len(self._colors)

    @property
    def colors(self) -> tuple[Color, ...]:
        return self._colors

    @property
    def index(self) -> int:
        return self._index

    def current(self) -> Color:
        return self._colors[self._index]

    def advance_if_bounced(self, bounced: bool) -> None:
        if bounced:
            self._index = (self._index + 1) % len(self._colors)

    def reset(self) -> None:
        self._index = 0
