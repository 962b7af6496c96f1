# src/fourgrid/config.py

from __future__ import annotations

import logging

BOARD_SIZE = 6
CONNECT_N = 4

HUMAN_SYMBOL = "X"    # always moves first
ENGINE_SYMBOL = "O"   # the maximizer in search

# Search depth (plies below the candidate move)
DEFAULT_DEPTH = 3
MIN_DEPTH = 1
MAX_DEPTH = 10

# Heuristic weights
WIN_SCORE = 10_000
CENTER_BONUS = 10
LINE_REACH = 3        # cells inspected each way along a line
LINE_BONUS = {1: 5, 2: 20, 3: 100}
BLOCK_WEIGHT = 2      # opponent potential counts double
DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

LOG_LEVEL = logging.WARNING
