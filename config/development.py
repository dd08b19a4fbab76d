import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "legacy" keeps the pad numbering the schedule UI was built against,
# "calendar" gives padding cells their real weekdays.
PAD_NUMBERING = os.getenv("PAD_NUMBERING", "legacy")

DISPLAY_FALLBACK = os.getenv("DISPLAY_FALLBACK", "--")
GRID_CACHE_SIZE = int(os.getenv("GRID_CACHE_SIZE", "64"))
