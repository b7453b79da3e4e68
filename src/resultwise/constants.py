"""Fixed strings shared across resultwise."""  # noqa: D415

# ==============================================================================
# Result messages
# ==============================================================================

# Separator used by Command.combine when the caller does not pass one.
DEFAULT_COMBINE_SEPARATOR = "; "

# Message reported by a success that was created without one.
DEFAULT_SUCCESS_MESSAGE = "OK"

COMMAND_FAILURE_FORMAT = "Command Failure ({error})."
QUERY_FAILURE_FORMAT = "Query Failure ({error})."

# ==============================================================================
# Option rendering
# ==============================================================================

NO_VALUE_SENTINEL = "HasNoValue"

# ==============================================================================
# Validation messages
# ==============================================================================

VALIDATION_FAILED_FORMAT = "Validation Failed ({detail})."

# ==============================================================================
# Environment
# ==============================================================================

ENV_PREFIX = "RESULTWISE_"
DEBUG_CHECKS_VAR = f"{ENV_PREFIX}DEBUG_CHECKS"
