"""
Service Constants (Single Source of Truth)

Static values decided at build time; not overridable through the environment.
"""

# Service Identity
SERVICE_NAME = "roster-api"
SERVICE_VERSION = "1.0.0"

# Logging Constants (12-Factor App Compliance)
ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# ─────────────────────────────────────────────────────────────────────────────
# Character Business Logic Constants
# ─────────────────────────────────────────────────────────────────────────────

# Shared by the sanitizer and the create handler
DEFAULT_IMAGE = "/images/default.jpg"

# Field declaration order (drives validation and error-message order)
CHARACTER_FIELDS = ("name", "talent", "gender", "height", "weight", "birthday", "image")
REQUIRED_CREATE_FIELDS = ("name", "talent", "gender", "height", "weight", "birthday")

# Range of the integer primary key column
MIN_CHARACTER_ID = -(2**31)
MAX_CHARACTER_ID = 2**31 - 1

GENDER_OPTIONS = ("Male", "Female", "None")

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Client-side message auto-clear delay (seconds)
MESSAGE_CLEAR_DELAY_SECONDS = 5.0
