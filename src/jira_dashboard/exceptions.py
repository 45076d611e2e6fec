"""Exception types raised by the dashboard's Jira and Confluence layers."""


class DashboardError(Exception):
    """Base class for all dashboard errors."""


class ConfigurationError(DashboardError, ValueError):
    """Raised when required configuration (base URL, token) is missing."""


class TrackerError(DashboardError):
    """Base class for failures talking to the Jira REST API.

    Attributes:
        status_code: HTTP status the facade should answer with
        upstream_status: Status returned by Jira, if a response was received
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        upstream_status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.upstream_status = upstream_status


class AuthExhaustedError(TrackerError):
    """Raised when every authentication strategy failed."""


class MalformedResponseError(AuthExhaustedError):
    """Raised when Jira answered with HTML or a non-JSON body.

    This almost always means the request was redirected to a login page, so
    it is treated as an authentication failure.
    """

    status_code = 401


class TrackerHttpError(TrackerError):
    """Raised for non-2xx Jira responses that are not authentication failures."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message, status_code=status, upstream_status=status)
        self.status = status


class NotFoundError(TrackerHttpError):
    """Raised when the requested Jira resource does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(404, message)


class NetworkError(TrackerError):
    """Raised when Jira cannot be reached (DNS, refused connection)."""

    status_code = 502


class TrackerTimeoutError(TrackerError, TimeoutError):
    """Raised when a Jira request timed out."""

    status_code = 504


class MissingTokenError(DashboardError):
    """Raised when an endpoint that requires a caller token received none."""

    status_code = 401

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
