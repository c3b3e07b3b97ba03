"""DTO for a picture returned by the cat image service"""

from pydantic import Field

from cattags.schemas.base import BaseSchema


class CatPictureSchema(BaseSchema):
    id: str
    url: str
    tags: list[str] = Field(default_factory=list)
