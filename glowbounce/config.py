"""Settings from the environment (or a .env file)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

FALLBACK_TEXT = "Mystery Font"


@dataclass(frozen=True)
class Settings:
    width: int = 1280
    height: int = 720
    fps: int = 60
    font_path: str | None = None
    seed: int | None = None
    title: str = "glowbounce"


def _optional_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value)


def load_settings(env=None) -> Settings:
    """Read GLOWBOUNCE_* variables. Malformed numbers raise ValueError."""
    if env is None:
        load_dotenv()
        env = os.environ
    return Settings(
        width=int(env.get("GLOWBOUNCE_WIDTH", "1280")),
        height=int(env.get("GLOWBOUNCE_HEIGHT", "720")),
        fps=int(env.get("GLOWBOUNCE_FPS", "60")),
        font_path=env.get("GLOWBOUNCE_FONT") or None,
        seed=_optional_int(env.get("GLOWBOUNCE_SEED")),
        title=env.get("GLOWBOUNCE_TITLE", "glowbounce"),
    )


def display_text(text: str | None) -> str:
    """Never hand the controller an empty string."""
    text = (text or "").replace("\0", "").strip()
    return text or FALLBACK_TEXT
