"""The game window and the command-line entry point."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Sequence

import pygame

from .model import ESC, WIN_HEIGHT, WIN_WIDTH, CubError, Game
from .parsing import check_input
from .raycast import FrameBuffer, cast_rays

_FPS = 60


def should_quit(key: int) -> bool:
    """Tell whether a key code means "leave the game" (Escape)."""
    return key in (ESC, pygame.K_ESCAPE)


def frame_to_surface(frame: FrameBuffer) -> pygame.Surface:
    """Turn a frame buffer into an opaque pygame surface of the same size."""
    packed = array("I", [(p << 8) & 0xFFFFFFFF for p in frame.pixels])
    if sys.byteorder == "little":
        packed.byteswap()
    surface = pygame.image.frombuffer(
        packed.tobytes(), (frame.width, frame.height), "RGBX"
    )
    return surface.copy()


def run(game: Game) -> int:
    """Open the window and render until it is closed or Escape is pressed."""
    game.reset_view()
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption("cubcaster")
        frame = FrameBuffer(WIN_WIDTH, WIN_HEIGHT)
        clock = pygame.time.Clock()
        while True:
            cast_rays(game, frame)
            image = frame_to_surface(frame)
            screen.blit(image, (0, 0))
            pygame.display.flip()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and should_quit(event.key):
                    return 0
                if event.type == pygame.VIDEOEXPOSE:
                    screen.blit(image, (0, 0))
                    pygame.display.flip()
            clock.tick(_FPS)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and start the game."""
    if argv is None:
        argv = sys.argv
    game = Game()
    try:
        check_input(argv, game)
    except CubError as exc:
        print(exc, file=sys.stderr)
        return 1
    print()
    print("-----GAME STARTED-----")
    print(f"Player starting position: x = {game.player.x:f}, y = {game.player.y:f}")
    print(f"Player starting angle: {game.player.angle:f} radians")
    return run(game)


if __name__ == "__main__":
    sys.exit(main())