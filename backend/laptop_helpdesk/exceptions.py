"""Domain errors raised by the helpdesk core."""


class HelpdeskError(Exception):
    """Base class for all helpdesk errors."""

    #: Short, user-facing summary used by the API and the tools.
    title = "Helpdesk error"


class ValidationError(HelpdeskError, ValueError):
    """Malformed request type, justification, requirements or descriptor.

    Recoverable: the caller re-prompts the user.
    """

    title = "Invalid request"


class NoActiveOrderError(HelpdeskError):
    """A submission was attempted while the session has no in-flight order."""

    title = "No active order"

    def __init__(self, session_key: str) -> None:
        self.session_key = session_key
        super().__init__(
            "No active laptop order found. Please start a new laptop order request first."
        )
