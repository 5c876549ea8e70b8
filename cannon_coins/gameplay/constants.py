"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# PLAY AREA (pixels)
# =============================================================================
PLAY_WIDTH = 800
PLAY_HEIGHT = 600

CANNON_WIDTH = 60
CANNON_HEIGHT = 60

# =============================================================================
# BULLETS
# =============================================================================
BULLET_WIDTH = 5
BULLET_HEIGHT = 15
BULLET_PERIOD_MS = 20         # advance task period
BULLET_STEP = 10              # pixels up per tick
BULLET_EXIT_Y = -20           # removed once y reaches this

# =============================================================================
# BALLS
# =============================================================================
BALL_PERIOD_MS = 16           # advance task period
BALL_MIN_RADIUS = 15
BALL_RADIUS_SPREAD = 35       # radius in [15, 50)
BALL_MARGIN = 20              # horizontal margin on each side
SPAWN_INTERVAL_MS = 1500

# =============================================================================
# DIFFICULTY
# =============================================================================
INITIAL_BALL_SPEED = 2.0      # pixels per ball tick
SPEED_INCREMENT = 0.5
DIFFICULTY_INTERVAL_MS = 2000

# =============================================================================
# SESSION
# =============================================================================
INITIAL_LIVES = 3
HIGHSCORE_KEY = "highscore"
HIGHSCORE_BANNER_MS = 3000
