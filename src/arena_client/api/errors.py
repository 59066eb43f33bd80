"""Error types raised by the Are.na API client."""


class HttpError(Exception):
    """Raised when the API answers with a non-success HTTP status.

    Attributes:
        status: Numeric HTTP status code of the response.
        message: Status text reported by the transport (e.g. "Unauthorized").
    """

    def __init__(self, message: str | None = None, status: int = 500):
        super().__init__(message)
        self.message = message or ""
        self.status = int(status)

    def __str__(self) -> str:
        return f"{self.message} (status={self.status})"
