"""Brick Breaker: a breakout simulation core with a gymnasium front end."""

from brick_breaker.session import Game, GameState, InputState, Session

__all__ = ["Game", "GameState", "InputState", "Session"]
