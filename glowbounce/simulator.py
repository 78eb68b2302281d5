"""Pygame preview window. Shows the canvas at 1:1 and reports resizes and keys."""

from typing import Callable

import pygame

from glowbounce.canvas import Canvas


class Simulator:
    """Opens a resizable window that displays the Canvas contents."""

    def __init__(self, canvas: Canvas, title: str = "glowbounce",
                 on_resize: Callable[[int, int], None] | None = None,
                 on_key: Callable[[int], None] | None = None):
        self.canvas = canvas
        self.on_resize = on_resize
        self.on_key = on_key

        pygame.init()
        self.screen = pygame.display.set_mode((canvas.width, canvas.height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

    def update(self) -> bool:
        """Handle events and blit canvas to screen. Returns False if window was closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if self.on_key:
                    self.on_key(event.key)
            elif event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                if self.on_resize:
                    self.on_resize(event.w, event.h)

        if self.canvas.width and self.canvas.height:
            frame = pygame.image.frombuffer(
                self.canvas.get_buffer(), (self.canvas.width, self.canvas.height), "RGB")
            self.screen.blit(frame, (0, 0))
        pygame.display.flip()
        return True

    def tick(self, fps: int = 60) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
