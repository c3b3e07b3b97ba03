"""API routes for cat tags and pictures"""

from fastapi import APIRouter, Depends, Query, status

from cattags.schemas.picture import CatPictureSchema
from cattags.schemas.tag import CatTagSchema
from cattags.services.tag import TagService

tag_router = APIRouter(prefix="/tags", tags=["Tags"])


@tag_router.get("/tags", response_model=list[str])
def read_tags(tag_service: TagService = Depends()):
    return tag_service.list_tags()


@tag_router.get("", response_model=CatPictureSchema)
def read_picture(tag: str = "", tag_service: TagService = Depends()):
    return tag_service.get_picture(tag)


@tag_router.post(
    "", response_model=CatTagSchema, status_code=status.HTTP_201_CREATED
)
def create_tag(tag: str = "", tag_service: TagService = Depends()):
    return tag_service.save_tag(tag)


@tag_router.put(
    "", response_model=CatTagSchema, status_code=status.HTTP_202_ACCEPTED
)
def update_tag(
    old_tag: str = Query("", alias="oldTag"),
    new_tag: str = Query("", alias="newTag"),
    tag_service: TagService = Depends(),
):
    return tag_service.update_tag(old_tag, new_tag)


@tag_router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_tag(tag: str = "", tag_service: TagService = Depends()) -> None:
    tag_service.delete_tag(tag)
