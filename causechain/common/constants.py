"""Application constants."""

EXIT_SUCCESS = 0
EXIT_RAISED = 10
EXIT_HARD_FAIL = 20
LOGGER_NAME = "causechain"
CONFIG_SECTION = "traversal"
TRAVERSAL_KEYS = ("follow_context", "max_depth")
JSON_LOG_FIELDS = (
    "timestamp",
    "level",
    "target",
    "event",
    "status",
    "depth",
    "error_type",
    "is_root",
    "error_code",
    "message",
)
