"""DTO for CatTag"""

from cattags.schemas.base import BaseReadSchema, BaseUpdateSchema


class CatTagSchema(BaseReadSchema):
    tag: str


class CatTagCreateSchema(BaseUpdateSchema):
    tag: str


class CatTagUpdateSchema(BaseUpdateSchema):
    tag: str | None = None
