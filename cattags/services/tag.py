"""Cat tag service: validates tags against cataas and keeps the saved ones"""

import logging
import random

from fastapi import Depends
from sqlalchemy.orm import Session

from cattags.errors.tag import (
    PictureNotFound,
    TagAlreadyExists,
    TagIsEmpty,
    TagNotFound,
    TagNotRecognized,
)
from cattags.errors.upstream import UpstreamUnavailable
from cattags.external.cataas import CataasClient, get_cataas_client
from cattags.models.tag import CatTag
from cattags.schemas.picture import CatPictureSchema
from cattags.schemas.tag import CatTagCreateSchema, CatTagUpdateSchema
from cattags.services.base import BaseService
from cattags.uow import get_uow

logger = logging.getLogger(__name__)

# how many example tags are offered when a tag is rejected
SUGGESTIONS_COUNT = 3


def normalize(tag: str) -> str:
    return tag.lower()


class TagService(BaseService[CatTag]):
    model = CatTag

    def __init__(
        self,
        db: Session = Depends(get_uow),
        cataas: CataasClient = Depends(get_cataas_client),
    ):
        self.db = db
        self.cataas = cataas
        self.random = random.Random()

    def _find(self, tag: str) -> CatTag | None:
        return self.db.query(CatTag).filter(CatTag.tag == normalize(tag)).first()

    def _require_not_empty(self, *tags: str | None) -> None:
        if any(not t for t in tags):
            raise TagIsEmpty

    def _validate_upstream(self, tag: str) -> None:
        """Raise TagNotRecognized with example tags if cataas has no such tag."""
        universe = self.cataas.get_tags()
        if not universe:
            raise UpstreamUnavailable(f"no tags returned by {self.cataas.base_url}")
        if normalize(tag) in {normalize(t) for t in universe}:
            return
        # sampled with replacement, duplicates are possible
        suggestions = self.random.choices(universe, k=SUGGESTIONS_COUNT)
        logger.info("Rejected tag %r, suggesting %s", tag, suggestions)
        raise TagNotRecognized(tag, suggestions)

    def list_tags(self) -> list[str]:
        return [t for (t,) in self.db.query(CatTag.tag).all()]

    def get_picture(self, tag: str) -> CatPictureSchema:
        self._require_not_empty(tag)
        if self._find(tag) is None:
            raise TagNotFound(tag)
        picture = self.cataas.get_random_picture(tag)
        if picture is None:
            raise PictureNotFound(tag)
        return picture

    def save_tag(self, tag: str) -> CatTag:
        self._require_not_empty(tag)
        if self._find(tag) is not None:
            raise TagAlreadyExists(tag)
        self._validate_upstream(tag)
        cat_tag = self.create(CatTagCreateSchema(tag=normalize(tag)))
        logger.info("Saved tag %r as %s", cat_tag.tag, cat_tag.id)
        return cat_tag

    def update_tag(self, old_tag: str, new_tag: str) -> CatTag:
        self._require_not_empty(old_tag, new_tag)
        cat_tag = self._find(old_tag)
        if cat_tag is None:
            raise TagNotFound(f"cannot update tag {old_tag} because it is not found")
        if self._find(new_tag) is not None:
            raise TagAlreadyExists(new_tag)
        self._validate_upstream(new_tag)
        cat_tag = self.update(cat_tag.id, CatTagUpdateSchema(tag=normalize(new_tag)))
        logger.info("Replaced tag %r with %r", normalize(old_tag), cat_tag.tag)
        return cat_tag

    def delete_tag(self, tag: str) -> None:
        self._require_not_empty(tag)
        cat_tag = self._find(tag)
        if cat_tag is None:
            raise TagNotFound(tag)
        value = cat_tag.tag
        self.delete(cat_tag.id)
        logger.info("Deleted tag %r", value)
