"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 1440

DEFAULT_DAY_START = "06:00"
DEFAULT_EVENING_START = "18:00"
DEFAULT_NIGHT_START = "22:00"
DEFAULT_BACKDATE_LIMIT_DAYS = 30

# Display value for the end of a first-part split entry (internally minute 1440).
END_OF_DAY_DISPLAY = "23:59"

DEFAULT_HISTORY_LIMIT = 30
DEFAULT_PENDING_LIMIT = 500
MAX_LIST_LIMIT = 500
