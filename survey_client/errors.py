"""Remote API errors."""


class RemoteError(Exception):
    """Upstream call failed or returned an unexpected shape."""

    def __init__(
        self,
        message: str = "Remote API error",
        status_code: int | None = None,
        retryable: bool = False,
        upstream_status: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.upstream_status = upstream_status
        self.retryable = retryable
        super().__init__(self.message)


class RemoteNotFoundError(RemoteError):
    """Upstream does not know the requested resource."""

    def __init__(self, message: str = "Remote resource not found"):
        super().__init__(message, status_code=404)
