import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from brick_breaker import config
from brick_breaker.render import Renderer
from brick_breaker.session import Game, GameState, InputState


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": config.FPS}

    # Must be a short, user-facing control string:
    user_guide = (
        "Controls: ←→ to move the paddle. Click (or press space) to restart after the game ends."
    )

    # Must be a short, user-facing description of the game:
    game_description = (
        "A classic Brick Breaker. Break all 80 bricks to clear the game, "
        "but let the ball past the paddle once and it's over."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    SCREEN_WIDTH = config.FIELD_WIDTH
    SCREEN_HEIGHT = config.FIELD_HEIGHT

    def __init__(self, render_mode="rgb_array"):
        super().__init__()
        self.render_mode = render_mode

        # Gymnasium spaces
        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        self.renderer = Renderer(self.SCREEN_WIDTH, self.SCREEN_HEIGHT)

        # Game state (initialized in reset)
        self.game = None
        self.steps = 0

        self.reset()

    @property
    def session(self):
        return self.game.session

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.game = Game(self.SCREEN_WIDTH, self.SCREEN_HEIGHT)
        self.steps = 0
        return self._get_observation(), self._get_info()

    def step(self, action):
        inputs = self._action_to_input(action)
        was_playing = self.game.state is GameState.PLAYING

        report = self.game.tick(inputs)
        self.steps += 1

        reward = 0.0
        if report is not None:
            reward += report.points

        terminated = self.game.state is not GameState.PLAYING
        # Terminal rewards only on the tick the session ends
        if terminated and was_playing:
            if self.game.state is GameState.GAME_CLEAR:
                reward += config.REWARD_CLEAR
            else:
                reward += config.REWARD_LOSE

        return (
            self._get_observation(),
            reward,
            terminated,
            False,  # truncated always False
            self._get_info()
        )

    def _action_to_input(self, action):
        action = np.asarray(action)
        if action.shape != (3,):
            raise ValueError(f"expected an action of shape (3,), got {action.shape}")
        movement = action[0]
        click = action[1] == 1
        return InputState(left_held=movement == 3, right_held=movement == 4, click=bool(click))

    def _get_observation(self):
        self.renderer.draw(self.game.render_data())
        return self.renderer.to_array()

    def render(self):
        return self._get_observation()

    def _get_info(self):
        return {
            "score": self.session.score.value(),
            "steps": self.steps,
            "bricks_left": len(self.session.bricks),
            "state": self.game.state.value,
        }

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(info, dict)
        assert info["bricks_left"] == config.BRICK_ROWS * config.BRICK_COLS

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)

        self.reset()

    def close(self):
        pygame.quit()
