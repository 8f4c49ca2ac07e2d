"""
Game constants for the snake engine.
"""

# Movement directions as (dx, dy); y grows downwards.
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)

# Board
GRID_COUNT = 20
INITIAL_SNAKE = [(10, 10), (9, 10), (8, 10)]
INITIAL_DIRECTION = RIGHT

# Dynamic speed (milliseconds per tick)
BASE_SPEED = 150
MIN_SPEED = 80
SPEED_INCREMENT = 2
SCORE_PER_SPEED_STEP = 5
SPEED_BOOST_FLOOR = 50
SPEED_BOOST_FACTOR = 0.6
SLOW_MOTION_FACTOR = 1.5

# Food
MAX_FOODS = 3
POWER_UP_PROBABILITY = 0.10
POWER_UP_POINTS = 5
MAX_SPAWN_ATTEMPTS = 100

# Score tiers: value -> (colour, relative size)
FOOD_TIERS = {
    1: ("#e53e3e", 0.8),
    2: ("#3182ce", 0.9),
    3: ("#38a169", 1.0),
}

# Power-ups: kind -> (duration ms, colour, label, symbol)
SPEED = "speed"
SLOW = "slow"
INVINCIBLE = "invincible"
POWER_UPS = {
    SPEED: (5000, "#ffa500", "Speed Boost", ">"),
    SLOW: (7000, "#9966cc", "Slow Motion", "~"),
    INVINCIBLE: (3000, "#ffd700", "Invincible", "+"),
}

# Flash warning window after any power-up activation
FLASH_DURATION = 1500
FLASH_BLINK_PERIOD = 200

# Audio cue tags
EAT_CUE = "eat"
GAME_OVER_CUE = "gameOver"
BACKGROUND_START_CUE = "backgroundStart"
BACKGROUND_STOP_CUE = "backgroundStop"
