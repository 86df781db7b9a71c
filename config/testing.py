import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_system_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
CORS_ORIGINS = "*"

WFH_MONTHLY_LIMIT = 1
HALF_DAY_HOURS = 4.0
TIMEZONE = "Asia/Kolkata"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
