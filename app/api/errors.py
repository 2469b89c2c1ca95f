from __future__ import annotations

ROUTE_NOT_FOUND = "Route not found"
INTERNAL_ERROR = "Something went wrong!"
GENERIC_ERROR_MESSAGE = "Internal server error"


def resolve_error_message(exc: BaseException, *, is_development: bool) -> str:
    """Return the client-facing message for an unhandled fault.

    Fault details are disclosed only in development; every other environment gets a
    generic message and the detail stays in the server log.
    """

    if is_development:
        return str(exc)
    return GENERIC_ERROR_MESSAGE
