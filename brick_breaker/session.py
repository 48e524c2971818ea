"""Session state, the win/loss state machine and the per-tick driver."""

import enum
import logging
from collections import namedtuple

from brick_breaker import config
from brick_breaker.collision import CollisionSystem
from brick_breaker.entities import Ball, BrickGrid, Paddle, PlayField, ScoreTracker

logger = logging.getLogger(__name__)


# Snapshot of the input device, sampled once at the start of a tick.
InputState = namedtuple("InputState", ["left_held", "right_held", "click"], defaults=(False, False, False))


def direction_of(inputs):
    if inputs.left_held:
        return -1
    if inputs.right_held:
        return 1
    return 0


class GameState(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"
    GAME_CLEAR = "game_clear"


BANNERS = {
    GameState.GAME_OVER: ("Game Over\nClick to restart", config.COLOR_GAME_OVER),
    GameState.GAME_CLEAR: ("Game Clear\nClick to restart", config.COLOR_GAME_CLEAR),
}


class GameStateMachine:
    """Playing -> GameOver | GameClear, each entered at most once per session."""

    def __init__(self):
        self.state = GameState.PLAYING

    @property
    def is_terminal(self):
        return self.state is not GameState.PLAYING

    def _finish(self, state):
        if self.is_terminal:
            return False
        self.state = state
        logger.info("Session finished: %s", state.value)
        return True

    def ball_lost(self):
        return self._finish(GameState.GAME_OVER)

    def bricks_cleared(self):
        return self._finish(GameState.GAME_CLEAR)


class Session:
    """Everything that lives for one playthrough. Restarting builds a new one."""

    def __init__(self, field=None):
        self.field = field or PlayField()
        self.paddle = Paddle()
        self.ball = Ball()
        self.bricks = BrickGrid()
        self.score = ScoreTracker()
        self.machine = GameStateMachine()
        self.collisions = CollisionSystem(self.field)
        self.steps = 0

    @property
    def state(self):
        return self.machine.state

    def step(self, inputs, dt):
        self.steps += 1
        self.paddle.move(direction_of(inputs))
        self.ball.advance(dt)

        report = self.collisions.resolve(self.ball, self.paddle, self.bricks, self.score)

        # Loss is checked first, so a last brick broken while the ball drops out still loses
        if report.ball_lost:
            self.machine.ball_lost()
        if self.bricks.is_empty():
            self.machine.bricks_cleared()
        if self.machine.is_terminal:
            self.ball.stop()
        return report


class Game:
    """Tick driver. Owns the current session and swaps it out on restart."""

    def __init__(self, width=config.FIELD_WIDTH, height=config.FIELD_HEIGHT):
        self.field = PlayField(width, height)
        self.session = Session(self.field)

    @property
    def state(self):
        return self.session.state

    def restart(self):
        logger.info("Restarting session (final score %d)", self.session.score.value())
        self.session = Session(self.field)

    def tick(self, inputs=InputState(), dt=config.TICK_SECONDS):
        """Advance one tick. Returns the collision report, or None if nothing was simulated."""
        if self.session.machine.is_terminal:
            if inputs.click:
                self.restart()
            return None
        return self.session.step(inputs, dt)

    def render_data(self):
        session = self.session
        shapes = []
        for brick in session.bricks:
            shapes.append({
                "kind": "rect",
                "center": (brick.x, brick.y),
                "size": (brick.width, brick.height),
                "color": brick.color,
                "tier": brick.tier,
            })
        shapes.append({
            "kind": "rect",
            "center": (session.paddle.x, session.paddle.y),
            "size": (session.paddle.width, session.paddle.height),
            "color": session.paddle.color,
        })
        shapes.append({
            "kind": "circle",
            "center": (session.ball.x, session.ball.y),
            "radius": session.ball.radius,
            "color": session.ball.color,
        })

        banner, banner_color = BANNERS.get(session.state, (None, None))
        return {
            "shapes": shapes,
            "score_text": f"Score: {session.score.value()}",
            "banner": banner,
            "banner_color": banner_color,
        }
