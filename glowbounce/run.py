"""Main run loop - ties together Canvas, Simulator, scheduler and controller."""

import argparse
import random
from dataclasses import replace

import pygame

from glowbounce.canvas import Canvas
from glowbounce.config import Settings, display_text, load_settings
from glowbounce.controller import AnimationState, ScreensaverController
from glowbounce.scheduler import FrameScheduler
from glowbounce.simulator import Simulator


def resize_handler(canvas: Canvas, controller: ScreensaverController):
    """Window resizes reallocate the canvas and rescale the animation."""
    def on_resize(width: int, height: int) -> None:
        canvas.resize(width, height)
        controller.on_resize(width, height)
    return on_resize


def key_handler(canvas: Canvas, controller: ScreensaverController, text: str):
    """Space stops / starts again (the reset button), R restarts from a new position."""
    def on_key(key: int) -> None:
        if key == pygame.K_SPACE:
            if controller.state is AnimationState.RUNNING:
                controller.stop()
                canvas.clear()
            else:
                controller.start(text)
        elif key == pygame.K_r:
            controller.start(text)
    return on_key


def run(text: str, settings: Settings | None = None) -> None:
    """Open the preview window and bounce `text` until it is closed (Esc quits)."""
    settings = settings or load_settings()

    canvas = Canvas(settings.width, settings.height, font_path=settings.font_path)
    scheduler = FrameScheduler()
    controller = ScreensaverController(
        scheduler, canvas.measure_text, canvas.width, canvas.height,
        emit=canvas.draw_frame, rng=random.Random(settings.seed),
    )

    sim = Simulator(canvas, title=settings.title,
                    on_resize=resize_handler(canvas, controller),
                    on_key=key_handler(canvas, controller, text))
    controller.start(text)

    try:
        while True:
            scheduler.run_pending()
            if not sim.update():
                break
            sim.tick(settings.fps)
    except KeyboardInterrupt:
        pass
    finally:
        controller.stop()
        sim.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glowbounce", description="Bounce a glowing string around the screen.")
    parser.add_argument("text", nargs="?", default="", help="String to display")
    parser.add_argument("--width", type=int, help="Viewport width in pixels")
    parser.add_argument("--height", type=int, help="Viewport height in pixels")
    parser.add_argument("--fps", type=int, help="Target frames per second")
    parser.add_argument("--font", dest="font_path", help="Path to a TTF/OTF font to draw with")
    parser.add_argument("--seed", type=int, help="Seed for the starting position")
    parser.add_argument("--record", metavar="PATH", help="Write an animated GIF instead of opening a window")
    parser.add_argument("--frames", type=int, default=120, help="Frames to record (default 120)")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    overrides = {k: v for k, v in vars(args).items()
                 if k in ("width", "height", "fps", "font_path", "seed") and v is not None}
    settings = replace(load_settings(), **overrides)
    text = display_text(args.text)

    if args.record:
        from glowbounce.record import record_gif
        record_gif(text, args.record, settings, frames=args.frames)
        return

    print(f"[run] Bouncing '{text}' at {settings.width}x{settings.height}, {settings.fps} fps")
    run(text, settings)


if __name__ == "__main__":
    main()
