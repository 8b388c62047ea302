"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LUNCH_BREAK_THRESHOLD_MINUTES = 45
DEFAULT_REJECTION_SAMPLE_SIZE = 5
MORNING_CUTOFF_HOUR = 12

CUSTOM_SHIFT_NAME = "Custom"
