"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
MIN_PASSWORD_LENGTH = 6

# Appraisal scores and KPI scores share the same 0..5 band.
SCORE_SCALE = 5
MAX_PROGRESS_PERCENT = 100

DEFAULT_QUERY_CACHE_TTL = 30
