"""Common application errors, may be raised from several services"""

from cattags.errors.base import ApplicationError


class NotFoundError(ApplicationError):
    http_code = 404
    error_code = 1404
    error = "Not found"
