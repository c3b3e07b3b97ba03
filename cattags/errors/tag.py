"""Tag usage errors"""

from cattags.errors.base import ApplicationError
from cattags.errors.common import NotFoundError


class TagIsEmpty(ApplicationError):
    http_code = 400
    error_code = 2001
    error = "Tag cannot be empty"


class TagAlreadyExists(ApplicationError):
    http_code = 400
    error_code = 2002
    error = "Tag already exists"


class TagNotRecognized(ApplicationError):
    http_code = 400
    error_code = 2003
    error = "There are no cat pictures for this tag"

    def __init__(self, tag: str, suggestions: list[str], where: str | None = None):
        super().__init__(
            f"{tag}. Try such tags as {', '.join(suggestions)}",
            where=where,
            extra={"suggestions": suggestions},
        )
        self.suggestions = suggestions


class TagNotFound(NotFoundError):
    error = "Tag not found"


class PictureNotFound(NotFoundError):
    error = "Nothing found by this tag"
