"""Error codes dictionary.

Single source of truth for the error codes returned by the API, whether a
client may retry them, and a human-readable fix suggestion.
"""

from typing import TypedDict


class ErrorCodeSpec(TypedDict, total=False):
    """Specification for an error code."""

    retryable: bool
    suggested_fix: str


ERROR_CODES: dict[str, ErrorCodeSpec] = {
    # ==========================================================================
    # Resource errors
    # ==========================================================================
    "USER_NOT_FOUND": {
        "retryable": False,
        "suggested_fix": "Create the profile with POST /api/users or PUT /api/users/firebase/{firebaseUid}",
    },
    "INVITE_NOT_FOUND": {
        "retryable": False,
        "suggested_fix": "List invites with GET /api/invites/received?userId=<id>",
    },
    # ==========================================================================
    # Validation errors (not retryable, fix input)
    # ==========================================================================
    "EMAIL_CONFLICT": {
        "retryable": False,
        "suggested_fix": "Use a different email or sign in with the account that owns it",
    },
    # ==========================================================================
    # Store errors
    # ==========================================================================
    "DATABASE_UNAVAILABLE": {
        "retryable": True,
        "suggested_fix": "Retry once the database server is reachable",
    },
    "DATABASE_ERROR": {
        "retryable": False,
    },
    "INTERNAL_ERROR": {
        "retryable": False,
    },
}


def get_error_spec(code: str) -> ErrorCodeSpec:
    """Get error specification by code.

    Args:
        code: The error code

    Returns:
        ErrorCodeSpec with retryable flag and suggested fix
    """
    return ERROR_CODES.get(code, {"retryable": False})


def is_retryable(code: str) -> bool:
    """Check if an error code is retryable."""
    spec = get_error_spec(code)
    return spec.get("retryable", False)
