import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PAD_NUMBERING = os.getenv("PAD_NUMBERING", "legacy")

DISPLAY_FALLBACK = os.getenv("DISPLAY_FALLBACK", "--")
GRID_CACHE_SIZE = int(os.getenv("GRID_CACHE_SIZE", "256"))
