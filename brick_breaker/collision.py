"""Per-tick collision detection and resolution.

Collisions are resolved in a fixed order: walls, paddle, bricks. Every
reflection negates a single velocity component, so the ball's speed is
unchanged; only the paddle steers the ball.
"""

import logging

from brick_breaker import config

logger = logging.getLogger(__name__)


class CollisionReport:
    """What happened during one collision pass."""

    def __init__(self):
        self.ball_lost = False
        self.paddle_hit = False
        self.bricks_hit = []
        self.points = 0

    def __repr__(self):
        return (
            f"CollisionReport(ball_lost={self.ball_lost}, paddle_hit={self.paddle_hit}, "
            f"bricks_hit={len(self.bricks_hit)}, points={self.points})"
        )


def overlap(ball, box):
    """Return the (x, y) penetration depths of the ball's bounds into ``box``, or None."""
    r = ball.radius
    ox = min(ball.x + r, box.right) - max(ball.x - r, box.left)
    oy = min(ball.y + r, box.bottom) - max(ball.y - r, box.top)
    if ox <= 0 or oy <= 0:
        return None
    return ox, oy


def check_wall_collision(ball, field):
    """Reflect off the left, right and top walls. Returns True if the ball left through the bottom."""
    r = ball.radius
    if ball.x - r < field.left:
        ball.pos.x = field.left + r
        ball.vel.x = -ball.vel.x
    elif ball.x + r > field.right:
        ball.pos.x = field.right - r
        ball.vel.x = -ball.vel.x

    if ball.y - r < field.top:
        ball.pos.y = field.top + r
        ball.vel.y = -ball.vel.y

    return ball.y + r >= field.bottom


def check_paddle_collision(ball, paddle):
    if overlap(ball, paddle) is None:
        return False

    # Offset from the paddle centre is deliberately left unclamped
    diff = ball.x - paddle.x
    ball.vel.x = diff * config.PADDLE_STEER
    ball.vel.y = -abs(ball.vel.y)
    ball.pos.y = paddle.top - ball.radius
    # sfx: bounce_paddle
    logger.debug("Paddle hit at offset %.1f, ball velocity now (%.1f, %.1f)", diff, ball.vel.x, ball.vel.y)
    return True


def check_brick_collisions(ball, grid, score):
    """Destroy every brick the ball overlaps and bounce along the contact normals.

    Each axis is flipped at most once, so two bricks hit on the same side do
    not cancel each other's bounce.
    """
    hits = []
    flip_x = flip_y = False
    for brick in grid:
        depths = overlap(ball, brick)
        if depths is None:
            continue
        ox, oy = depths
        # Smaller penetration marks the contact normal; corners bounce vertically
        if ox < oy:
            flip_x = True
        else:
            flip_y = True
        hits.append(brick)

    for brick in hits:
        # sfx: break_brick
        grid.destroy(brick)
        score.increment(config.BRICK_SCORE)
        logger.debug("Brick (%d, %d) destroyed, %d left", brick.row, brick.col, len(grid))

    if flip_x:
        ball.vel.x = -ball.vel.x
    if flip_y:
        ball.vel.y = -ball.vel.y
    return hits


class CollisionSystem:
    def __init__(self, field):
        self.field = field

    def resolve(self, ball, paddle, grid, score):
        report = CollisionReport()
        report.ball_lost = check_wall_collision(ball, self.field)
        report.paddle_hit = check_paddle_collision(ball, paddle)
        before = score.value()
        report.bricks_hit = check_brick_collisions(ball, grid, score)
        report.points = score.value() - before
        return report
