"""Custom exceptions for the fleet CLI.

All exception classes carry a short user-facing message plus optional
details, so the CLI entry point can print them without a stack trace.
"""


class FleetCLIError(Exception):
    """Base exception for all fleet CLI errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ExpectedError(FleetCLIError):
    """An error caused by user input or by the state of the fleet.

    Reported as a plain message with a non-zero exit code.

    Examples:
        - Neither --application nor --device given
        - No variables defined for the selected application or device
    """

    pass


class NotLoggedInError(ExpectedError):
    """Raised when the SDK session is not authenticated."""

    def __init__(
        self,
        message: str = "You have to log in to continue",
        details: str | None = None,
    ):
        super().__init__(message, details)

    def __str__(self) -> str:
        lines = [self.message]
        if self.details:
            lines.append(self.details)
        return "\n\n".join(lines)


class ConfigurationError(FleetCLIError):
    """Exception raised for client configuration problems.

    Examples:
        - Malformed API host in BALENARC_BALENA_URL
        - API key rejected by the login call
    """

    def __init__(self, message: str, field: str | None = None, details: str | None = None):
        self.field = field
        super().__init__(message, details)


class APIError(FleetCLIError):
    """A remote call through the SDK failed.

    Rendered as one line naming the failed operation, e.g.
    ``Request failed while trying to list device types (HTTP 503): Service Unavailable``.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        details: str | None = None,
        original_error: Exception | None = None,
    ):
        self.operation = operation
        self.status_code = status_code
        self.original_error = original_error
        super().__init__(message, details)

    def __str__(self) -> str:
        text = self.message
        if self.operation:
            text += f" while trying to {self.operation}"
        if self.status_code:
            text += f" (HTTP {self.status_code})"
        if self.details:
            text += f": {self.details}"
        return text
