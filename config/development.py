import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Uploaded exports are read fully in memory
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(16 * 1024 * 1024)))

DEFAULT_DEDUCT_LUNCH_BREAK = bool(int(os.getenv("DEDUCT_LUNCH_BREAK", "0")))
DEFAULT_LUNCH_BREAK_THRESHOLD_MINUTES = int(os.getenv("LUNCH_BREAK_THRESHOLD_MINUTES", "45"))
# Comma separated YYYY-MM-DD dates
DEFAULT_HOLIDAYS = os.getenv("HOLIDAYS", "")

REJECTION_SAMPLE_SIZE = int(os.getenv("REJECTION_SAMPLE_SIZE", "5"))
