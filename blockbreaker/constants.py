"""Gameplay, layout and palette constants.

Centralizes the default tuning values; ``GameConfig`` takes its defaults
from here and the render model its colors.
"""

import math

# Field
FIELD_WIDTH = 800
FIELD_HEIGHT = 600

# Paddle
PADDLE_WIDTH = 100
PADDLE_HEIGHT = 20
PADDLE_BOTTOM_OFFSET = 30  # paddle center sits this far above the bottom edge
PADDLE_MAX_DEFLECTION = math.pi / 3  # 60 degrees either side of vertical

# Ball
BALL_RADIUS = 10
BALL_SPEED = 5.0
BALL_REST_OFFSET = 50  # resting ball center sits this far above the bottom edge
BALL_LAUNCH_ANGLE = math.pi / 4

# Blocks
BLOCK_ROWS = 5
BLOCK_COLS = 9
BLOCK_WIDTH = 80
BLOCK_HEIGHT = 30
BLOCK_SPACING = 5
TOP_MARGIN = 50
SIDE_MARGIN = 20
BLOCK_COLOR_MIN = 0.3  # channels drawn from [BLOCK_COLOR_MIN, 1.0)
BLOCK_HIT_JITTER = 0.1  # velocity perturbation drawn from [-j, +j)

# Session
INITIAL_LIVES = 3
SCORE_PER_BLOCK = 10
TICK_RATE = 60

# Palette (float RGB, 0..1)
BACKGROUND_COLOR = (0.1, 0.1, 0.2)
PADDLE_COLOR = (0.0, 0.7, 1.0)
BALL_COLOR = (1.0, 0.8, 0.0)
TEXT_COLOR = (1.0, 1.0, 1.0)
MODAL_COLOR = (0.0, 0.0, 0.0, 0.7)
HIGHLIGHT_EDGE_COLOR = (1.0, 1.0, 1.0, 0.5)
SHADOW_EDGE_COLOR = (0.0, 0.0, 0.0, 0.5)

__all__ = [name for name in globals().keys() if name.isupper()]
