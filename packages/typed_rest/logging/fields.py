"""Canonical logging field names for typed REST calls.

Keeping names centralized prevents drift between the pipeline, the client and
any log consumer parsing the JSON output.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"

# Call correlation fields.
CALL_ID = "call_id"
HTTP_METHOD = "http_method"
URL = "url"
CARDINALITY = "cardinality"

# Call completion fields.
CALL_DISPATCH_EVENT = "rest_call_dispatch"
CALL_COMPLETION_EVENT = "rest_call_completion"
SUCCESS = "success"
STATUS_CODE = "status_code"
DURATION_MS = "duration_ms"
OUTCOME = "outcome"
ERROR_KIND = "error_kind"
STAGE = "stage"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
