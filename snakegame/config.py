"""
Runtime configuration, read from the environment (and a .env file if present).

Values here only affect how the engine is driven (board size defaults, tick
budget, logging). The game rules themselves live in domain/constants.py.
"""

import os

from dotenv import load_dotenv

load_dotenv()

BOARD_WIDTH = int(os.getenv('SNAKE_BOARD_WIDTH', '20'))
BOARD_HEIGHT = int(os.getenv('SNAKE_BOARD_HEIGHT', '20'))

# Random draws per food placement before falling back to a board scan
FOOD_MAX_ATTEMPTS = int(os.getenv('SNAKE_FOOD_MAX_ATTEMPTS', '1000'))

# Upper bound on tick() calls for a headless run
MAX_TICKS = int(os.getenv('SNAKE_MAX_TICKS', '100000'))

LOG_LEVEL = os.getenv('SNAKE_LOG_LEVEL', 'INFO').upper()
