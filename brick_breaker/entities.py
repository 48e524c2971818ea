import numpy as np
import pygame

from brick_breaker import config


class PlayField:
    """Fixed rectangular bounds; walls sit on the edges."""

    left = 0
    top = 0

    def __init__(self, width=config.FIELD_WIDTH, height=config.FIELD_HEIGHT):
        self.width = width
        self.height = height

    @property
    def right(self):
        return self.width

    @property
    def bottom(self):
        return self.height


class Box:
    """Axis-aligned rectangle positioned by its centre."""

    def __init__(self, x, y, width, height):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height

    @property
    def left(self):
        return self.x - self.width / 2

    @property
    def right(self):
        return self.x + self.width / 2

    @property
    def top(self):
        return self.y - self.height / 2

    @property
    def bottom(self):
        return self.y + self.height / 2


class Paddle(Box):
    def __init__(self, x=config.PADDLE_X, y=config.PADDLE_Y,
                 width=config.PADDLE_WIDTH, height=config.PADDLE_HEIGHT):
        super().__init__(x, y, width, height)
        self.vx = 0.0
        self.color = config.COLOR_PADDLE

    def move(self, direction):
        # direction: -1 left, 0 none, 1 right
        self.vx = direction * config.PADDLE_STEP
        self.x += self.vx
        self.x = float(np.clip(self.x, config.PADDLE_MIN_X, config.PADDLE_MAX_X))


class Ball:
    def __init__(self, x=config.BALL_X, y=config.BALL_Y,
                 velocity=config.BALL_VELOCITY, radius=config.BALL_RADIUS):
        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2(velocity)
        self.radius = radius
        self.color = config.COLOR_BALL

    @property
    def x(self):
        return self.pos.x

    @property
    def y(self):
        return self.pos.y

    @property
    def speed(self):
        return self.vel.length()

    def advance(self, dt):
        self.pos += self.vel * dt

    def stop(self):
        self.vel.update(0, 0)


def tier_for_row(row):
    if row < 2:
        return 0
    if row < 4:
        return 1
    if row < 6:
        return 2
    return 3


class Brick(Box):
    def __init__(self, x, y, row, col, width=config.BRICK_WIDTH, height=config.BRICK_HEIGHT):
        super().__init__(x, y, width, height)
        self.row = row
        self.col = col
        self.tier = tier_for_row(row)
        self.alive = True

    @property
    def color(self):
        return config.TIER_COLORS[self.tier]


class BrickGrid:
    """Ordered collection of live bricks, laid out row by row."""

    def __init__(self, rows=config.BRICK_ROWS, cols=config.BRICK_COLS):
        self.bricks = []
        for row in range(rows):
            for col in range(cols):
                x = col * config.BRICK_SPACING_X + config.BRICK_OFFSET_X
                y = row * config.BRICK_SPACING_Y + config.BRICK_OFFSET_Y
                self.bricks.append(Brick(x, y, row, col))

    def __len__(self):
        return len(self.bricks)

    def __iter__(self):
        return iter(self.bricks)

    def is_empty(self):
        return not self.bricks

    def destroy(self, brick):
        brick.alive = False
        self.bricks.remove(brick)


class ScoreTracker:
    def __init__(self):
        self._value = 0

    def increment(self, amount=config.BRICK_SCORE):
        if amount < 0:
            raise ValueError(f"score increment must be non-negative, got {amount}")
        self._value += amount

    def value(self):
        return self._value

    def reset(self):
        self._value = 0
