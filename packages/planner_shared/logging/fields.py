"""Structured log keys shared by every Planner module."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"

# Service entrypoint events.
COMPONENT_ID = "component_id"
API_NAME = "api_name"
PUBLIC_API_INVOCATION_EVENT = "public_api_invocation"
PUBLIC_API_COMPLETION_EVENT = "public_api_completion"
SUCCESS = "success"
DURATION_MS = "duration_ms"
ERRORS = "errors"

# Request-level fields.
HTTP_METHOD = "http_method"
HTTP_PATH = "http_path"

# Store call fields.
STORE_TABLE = "store_table"
STORE_OPERATION = "store_operation"

# Process identity.
SERVICE = "service"
ENVIRONMENT = "environment"
