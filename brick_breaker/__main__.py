import logging
import sys

import pygame

from brick_breaker import config
from brick_breaker.render import Renderer
from brick_breaker.session import Game, InputState

logger = logging.getLogger("brick_breaker")


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.FIELD_WIDTH, config.FIELD_HEIGHT))
        pygame.display.set_caption("Brick Breaker")
        clock = pygame.time.Clock()
        renderer = Renderer(config.FIELD_WIDTH, config.FIELD_HEIGHT, surface=screen)
        game = Game()

        print("\n" + "=" * 30)
        print("CONTROLS: ←→ to move the paddle, click to restart, Esc to quit.")
        print("=" * 30 + "\n")

        done = False
        while not done:
            click = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    done = True
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    done = True
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    click = True

            keys = pygame.key.get_pressed()
            inputs = InputState(left_held=keys[pygame.K_LEFT], right_held=keys[pygame.K_RIGHT], click=click)
            game.tick(inputs)

            renderer.draw(game.render_data())
            pygame.display.flip()
            clock.tick(config.FPS)
    except pygame.error as e:
        logger.error("Could not run the game window: %s", e)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
