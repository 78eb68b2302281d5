"""Record an animated GIF of the screensaver by rendering frames headlessly."""

import random
from pathlib import Path

from glowbounce.canvas import Canvas
from glowbounce.config import Settings
from glowbounce.controller import ScreensaverController
from glowbounce.scheduler import FrameScheduler

GIF_FPS = 30


def record_gif(text: str, out_path, settings: Settings | None = None,
               frames: int = 120, fps: int = GIF_FPS) -> int:
    """Render `frames` frames and save them as a looping GIF. Returns frames written."""
    settings = settings or Settings()
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    canvas = Canvas(settings.width, settings.height, font_path=settings.font_path)
    images = []

    def emit(frame) -> None:
        canvas.draw_frame(frame)
        images.append(canvas.to_image())

    scheduler = FrameScheduler()
    controller = ScreensaverController(
        scheduler, canvas.measure_text, canvas.width, canvas.height,
        emit=emit, rng=random.Random(settings.seed),
    )
    controller.start(text)
    while len(images) < frames and scheduler.run_pending():
        pass
    controller.stop()

    if not images:
        print(f"[record] Nothing rendered, skipping {out_path}")
        return 0

    # Save as GIF (duration in ms per frame)
    images[0].save(
        out_path,
        save_all=True,
        append_images=images[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    print(f"[record] Saved {out_path} ({len(images)} frames)")
    return len(images)
