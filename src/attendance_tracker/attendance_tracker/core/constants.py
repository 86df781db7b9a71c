"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6_371_000

DEFAULT_WFH_MONTHLY_LIMIT = 1
DEFAULT_HALF_DAY_HOURS = 4.0
DEFAULT_TIMEZONE = "Asia/Kolkata"

MIN_PASSWORD_LENGTH = 6
PHONE_DIGITS = 10
