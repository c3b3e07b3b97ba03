"""Tag of interest, validated against the cat image service"""

from sqlalchemy.orm import Mapped, mapped_column

from cattags.models.base import BaseModel


class CatTag(BaseModel):
    __tablename__ = "cat_tags"

    # always stored lower-cased
    tag: Mapped[str] = mapped_column(unique=True)
