"""Cat image service errors"""

from cattags.errors.base import ApplicationError


class UpstreamUnavailable(ApplicationError):
    http_code = 502
    error_code = 3001
    error = "Cat image service is unavailable"
