from brick_breaker.session import GameState


def policy(env):
    # Strategy: Keep the paddle centre under the ball. Aim slightly off-centre so the
    # ball never comes back perfectly vertical. Click to restart once the game has ended.
    session = env.session
    if env.game.state is not GameState.PLAYING:
        return [0, 1, 0]  # Restart

    target = session.ball.x + 10
    dx = target - session.paddle.x

    if dx > 4:
        return [4, 0, 0]  # Move right
    elif dx < -4:
        return [3, 0, 0]  # Move left
    else:
        return [0, 0, 0]  # Hold position
