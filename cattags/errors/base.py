from typing import Any


class ApplicationError(Exception):
    """General application error"""

    http_code: int | None = None
    error_code: int
    error: str

    def __init__(
        self,
        details: Any | None = None,
        where: str | None = None,
        extra: dict[str, Any] | None = None,
    ):
        self.error = self.error
        if details:
            self.error += f": {details}"
        self.where = where
        # additional fields rendered next to the error in the response body
        self.extra = extra or {}
        super().__init__(self.error)
