"""Timezone and period constants shared by every resolution tier"""

DEFAULT_TIMEZONE = "Africa/Lagos"

PERIOD_NONE = "none"

# Buckets the extractors are known to emit. The resolver treats period as opaque.
KNOWN_PERIODS = (
    "today",
    "yesterday",
    "this_week",
    "last_week",
    "this_month",
    "last_month",
    "custom",
    "last_trip",
    PERIOD_NONE,
)

DEFAULT_HUMAN_READABLE = "today"
