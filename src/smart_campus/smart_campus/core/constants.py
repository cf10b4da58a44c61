"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TOKEN_TTL_HOURS = 24
TOKEN_ALGORITHM = "HS256"
MIN_PASSWORD_LENGTH = 6

# Rough weekly capacity assumed for every classroom when computing usage.
WEEKLY_SLOTS_PER_CLASSROOM = 40

DEFAULT_ACTIVITY_LIMIT = 10
DEFAULT_POOL_SIZE = 10
