"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

PIN_LENGTH = 4
CARD_ID_LENGTH = 10
MIN_PASSWORD_LENGTH = 6

# Reporting periods start and end at the daily cutover.
CUTOVER_TIME = time(6, 0)
# Pre-seeded day boundary markers sit one second before the cutover.
DAY_BOUNDARY_TIME = time(5, 59, 59)

DEFAULT_SEED_DAYS = 365

# label, start "HH:MM", weight
DEFAULT_REPORT_BUCKETS = (
    ("06-22", "06:00", 1.0),
    ("22-24", "22:00", 1.25),
    ("24-06", "00:00", 1.40),
)
