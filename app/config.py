# app/config.py
from pathlib import Path

# Trial lengths offered in the top bar (seconds). Any positive int is accepted.
DURATIONS = (30, 60)
DEFAULT_DURATION = 30

# Word pool sizing
INITIAL_POOL = 180
MIN_START_POOL = 120
LOOKAHEAD_MARGIN = 50
GROWTH_BATCH = 120

# Word line rendering window
VISIBLE_AHEAD = 80
VISIBLE_BEHIND = 24

TICK_MS = 1000

# Optional custom corpus; the built-in list is used when missing
WORDS_FILE = Path("assets/words.txt")

LOG_FILE = "app.log"
