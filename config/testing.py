SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

PAD_NUMBERING = "legacy"

DISPLAY_FALLBACK = "--"
GRID_CACHE_SIZE = 16
