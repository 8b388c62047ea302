SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

MAX_UPLOAD_BYTES = 1024 * 1024

DEFAULT_DEDUCT_LUNCH_BREAK = False
DEFAULT_LUNCH_BREAK_THRESHOLD_MINUTES = 45
DEFAULT_HOLIDAYS = ""

REJECTION_SAMPLE_SIZE = 3
