"""Base DTOs for API endpoints"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    # needed for ORM
    model_config = ConfigDict(from_attributes=True)

    # default dump options to deserialize pydantic models
    def dump(self):
        return self.model_dump(exclude_none=True)


class BaseReadSchema(BaseSchema):
    id: UUID
    created_at: datetime
    modified_at: datetime | None = None


class BaseUpdateSchema(BaseSchema):
    pass
