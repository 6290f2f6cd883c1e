"""Constants and defaults.

Note: Keep rule boundaries here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

# Shift classifier boundaries (minutes since midnight)
NEXT_DAY_CUTOFF_MINUTES = 300  # ends before 05:00 belong to the next day
DAY_SHIFT_END_MINUTES = 1080  # 18:00
NIGHT_START_AFTER_MINUTES = 839  # after 13:59
NIGHT_END_AFTER_MINUTES = 1620  # after 03:00 next day
BOTH_START_BEFORE_MINUTES = 840  # 14:00
BOTH_END_MAX_MINUTES = 1320  # 22:00

# Statutory breaks
UNDER_18_BREAK_THRESHOLD_HOURS = 4.5
ADULT_SHORT_BREAK_THRESHOLD_HOURS = 4.5
ADULT_LONG_BREAK_THRESHOLD_HOURS = 6.0
SHORT_BREAK_MINUTES = 15
LONG_BREAK_MINUTES = 30

# Sales forecast import (hours, 24h clock)
DAY_SHIFT_START_HOUR = 6
DAY_SHIFT_END_HOUR = 16
NIGHT_SHIFT_START_HOUR = 16
NIGHT_SHIFT_END_HOUR = 23
STORE_OPEN_HOUR = 10
STORE_CLOSE_HOUR = 23
MEAL_PERIODS = ("Breakfast", "Lunch", "Afternoon", "Dinner")
DAY_TOTALS_LABEL = "day totals"
SALES_TOLERANCE = 0.01
MAX_PLAUSIBLE_HOURLY_FORECAST = 1000

DEFAULT_MAX_DEPLOYMENTS_PER_SHIFT = 2
