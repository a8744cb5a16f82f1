"""A line of text crawling clockwise around the edge of the window."""

from __future__ import annotations

from dataclasses import dataclass

WIDTH, HEIGHT = 800, 600
TEXT = "this works!"
CHAR_SIZE = 24
TEXT_WIDTH = 128
SPEED = 1.5
FRAME_RATE = 60


@dataclass
class Marquee:
    """Text placed by its top-left corner, travelling along the window's border."""

    x: float = 0.0
    y: float = 0.0
    width: float = WIDTH
    height: float = HEIGHT
    text_width: float = TEXT_WIDTH
    char_size: float = CHAR_SIZE
    speed: float = SPEED
    text: str = TEXT

    def step(self) -> None:
        """Move one frame: right along the top, down, left along the bottom, up.

        A position that is on none of the four edges stays where it is.
        """
        right = self.width - self.text_width
        bottom = self.height - self.char_size

        if 0 <= self.x < right and self.y == 0:
            self.x += self.speed
        elif self.x == right and 0 <= self.y < bottom:
            self.y += self.speed
        elif 0 < self.x <= right and self.y == bottom:
            self.x -= self.speed
        elif self.x == 0 and 0 < self.y <= bottom:
            self.y -= self.speed


def run() -> None:
    """Open a window with the text crawling around its border."""
    import pygame

    marquee = Marquee()
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Marquee")
        font = pygame.font.Font(None, CHAR_SIZE)
        label = font.render(marquee.text, True, (255, 255, 255))
        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(FRAME_RATE)
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            screen.fill((0, 0, 0))
            screen.blit(label, (marquee.x, marquee.y))
            marquee.step()
            pygame.display.flip()
    finally:
        pygame.quit()