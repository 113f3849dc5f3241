"""
Application exceptions.

Services raise these; the handlers registered in main.py turn them into
`{"error": ..., "code": ...}` JSON responses with the matching status code.
"""


class PortfolioError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class UnauthorizedError(PortfolioError):
    """No or invalid session on a protected route."""

    status_code = 401
    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ValidationError(PortfolioError):
    """Missing or malformed input."""

    status_code = 400
    code = "VALIDATION_ERROR"


class NotFoundError(PortfolioError):
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(PortfolioError):
    """A unique column (slug, email) already holds the submitted value."""

    status_code = 409
    code = "CONFLICT"


class UpstreamError(PortfolioError):
    """Object storage or outbound email failed."""

    status_code = 500
    code = "UPSTREAM_FAILURE"


class InternalError(PortfolioError):
    status_code = 500
    code = "INTERNAL_ERROR"
