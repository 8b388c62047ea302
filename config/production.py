import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(16 * 1024 * 1024)))

DEFAULT_DEDUCT_LUNCH_BREAK = bool(int(os.getenv("DEDUCT_LUNCH_BREAK", "0")))
DEFAULT_LUNCH_BREAK_THRESHOLD_MINUTES = int(os.getenv("LUNCH_BREAK_THRESHOLD_MINUTES", "45"))
DEFAULT_HOLIDAYS = os.getenv("HOLIDAYS", "")

REJECTION_SAMPLE_SIZE = int(os.getenv("REJECTION_SAMPLE_SIZE", "5"))
