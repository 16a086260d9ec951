import os

# Shared defaults; the environment-specific modules override what they need.
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_db"),
}

LOG_FILE = os.getenv("LOG_FILE", "timeclock.log")

# Reporting periods run from the cutover on the 1st to the cutover on the 1st of the next month.
CUTOVER_TIME = os.getenv("CUTOVER_TIME", "06:00")
# Time of day at which the pre-seeded day boundary markers are written.
DAY_BOUNDARY_TIME = os.getenv("DAY_BOUNDARY_TIME", "05:59:59")

# label, start, weight (weighted minutes column)
REPORT_BUCKETS = [
    ("06-22", "06:00", 1.0),
    ("22-24", "22:00", 1.25),
    ("24-06", "00:00", 1.40),
]
