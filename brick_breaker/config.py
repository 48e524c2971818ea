"""Game parameters for Brick Breaker.

Positions are centre coordinates in field units; velocities are units/second.
"""

# --- Play field ---
FIELD_WIDTH = 800
FIELD_HEIGHT = 600
FPS = 60
TICK_SECONDS = 1.0 / FPS

# --- Paddle ---
PADDLE_X = 400
PADDLE_Y = 550
PADDLE_WIDTH = 100
PADDLE_HEIGHT = 20
PADDLE_STEP = 8  # per tick
PADDLE_MIN_X = 50
PADDLE_MAX_X = 750
PADDLE_STEER = 5  # ball vx per unit of offset from the paddle centre

# --- Ball ---
BALL_X = 400
BALL_Y = 500
BALL_RADIUS = 10
BALL_VELOCITY = (150, -150)

# --- Bricks ---
BRICK_ROWS = 8
BRICK_COLS = 10
BRICK_WIDTH = 70
BRICK_HEIGHT = 25
BRICK_SPACING_X = 75
BRICK_SPACING_Y = 30
BRICK_OFFSET_X = 80
BRICK_OFFSET_Y = 80
BRICK_SCORE = 10

# --- Colors ---
COLOR_BG = (0, 0, 0)
COLOR_PADDLE = (102, 102, 255)
COLOR_BALL = (255, 255, 255)
COLOR_TEXT = (255, 255, 255)
COLOR_GAME_OVER = (255, 0, 0)
COLOR_GAME_CLEAR = (0, 255, 0)
TIER_COLORS = (
    (255, 0, 0),    # Red
    (255, 136, 0),  # Orange
    (255, 255, 0),  # Yellow
    (0, 255, 0),    # Green
)

# --- Rewards (gymnasium wrapper) ---
REWARD_CLEAR = 100.0
REWARD_LOSE = -100.0
