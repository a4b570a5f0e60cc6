"""Service-level errors."""


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class RefreshError(Exception):
    """Refreshing a cache entry from the remote API failed; the old entry is kept."""

    def __init__(self, key: str, cause: Exception):
        self.key = key
        self.cause = cause
        self.message = f"Failed to refresh {key}: {cause}"
        super().__init__(self.message)
