"""Machine-readable error codes placed in ``ErrorDetail.code``."""

# Request validation.
VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_ARGUMENT = "INVALID_ARGUMENT"

# Missing records.
NOT_FOUND = "NOT_FOUND"
RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

# Store round trips.
DEPENDENCY_FAILURE = "DEPENDENCY_FAILURE"
DELETE_NOT_APPLIED = "DELETE_NOT_APPLIED"

# Everything else.
INTERNAL_ERROR = "INTERNAL_ERROR"
