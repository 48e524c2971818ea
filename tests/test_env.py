import numpy as np
import pytest

from brick_breaker import config
from brick_breaker.policy import policy
from brick_breaker.session import GameState


def test_validate_implementation(env):
    env.validate_implementation()


def test_reset_returns_observation_and_info(env):
    obs, info = env.reset(seed=7)
    assert obs.shape == (600, 800, 3)
    assert obs.dtype == np.uint8
    assert env.observation_space.contains(obs)
    assert info == {"score": 0, "steps": 0, "bricks_left": 80, "state": "playing"}


def test_observation_shows_entities(env):
    obs, _ = env.reset()
    # centre of the top-left brick is red, the paddle centre is the paddle colour
    assert tuple(obs[80, 80]) == config.TIER_COLORS[0]
    assert tuple(obs[550, 400]) == config.COLOR_PADDLE


@pytest.mark.parametrize("movement, x", [(0, 400), (1, 400), (2, 400), (3, 392), (4, 408)])
def test_movement_actions(env, movement, x):
    env.step([movement, 0, 0])
    assert env.session.paddle.x == x


def test_bad_action_shape(env):
    with pytest.raises(ValueError):
        env.step([3, 0])


def test_brick_reward(env):
    ball = env.session.ball
    ball.pos.update(80, 312)
    ball.vel.update(0, -150)
    _, reward, terminated, truncated, info = env.step([0, 0, 0])
    assert reward == 10
    assert not terminated
    assert not truncated
    assert info["score"] == 10
    assert info["bricks_left"] == 79


def test_loss_reward_applied_once(env):
    ball = env.session.ball
    ball.pos.update(400, 595)
    ball.vel.update(0, 150)
    _, reward, terminated, _, info = env.step([0, 0, 0])
    assert terminated
    assert reward == config.REWARD_LOSE
    assert info["state"] == "game_over"

    _, reward, terminated, _, _ = env.step([0, 0, 0])
    assert terminated
    assert reward == 0


def test_click_restarts_after_game_over(env):
    env.session.ball.pos.update(400, 595)
    env.session.ball.vel.update(0, 150)
    env.step([0, 0, 0])
    obs, reward, terminated, _, info = env.step([0, 1, 0])
    assert not terminated
    assert info["state"] == "playing"
    assert info["bricks_left"] == 80
    assert info["score"] == 0


def test_policy_plays_headless(env):
    env.reset(seed=0)
    scores = []
    for _ in range(600):
        _, _, terminated, _, info = env.step(policy(env))
        assert 50 <= env.session.paddle.x <= 750
        scores.append(info["score"])
    assert env.game.state in (GameState.PLAYING, GameState.GAME_OVER, GameState.GAME_CLEAR)
    assert max(scores) > 0


def test_policy_clicks_when_finished(env):
    env.session.machine.ball_lost()
    assert policy(env) == [0, 1, 0]
