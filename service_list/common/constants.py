"""Application constants."""

STAGES = (
    "transform",
)
EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "level",
    "run_id",
    "stage",
    "language",
    "source",
    "event",
    "status",
    "duration_ms",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)

# Upstream property keys are "<N>. <Label>".
OPENING_HOURS_PREFIX = 8
CLOSING_HOURS_PREFIX = 9
COMMENTS_KEY = "comments"
CLOSE_AT_PREFIX = "Close at "
REFERRAL_METHOD_KEY = "10. Referral Method"
REFERRAL_NOT_REQUIRED_SENTINELS = (
    "Referrals not accepted",
    "Referral is not required",
)
