"""Base for all ORM models"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlalchemy.inspection import inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class BaseModel(DeclarativeBase):
    # do not create separate table for this class
    __abstract__ = True

    # opaque identifier, generated on our side so it is known before flush
    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=func.now(), nullable=False
    )
    modified_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    def __repr__(self):
        model_name = self.__class__.__name__
        attr_str = ", ".join(
            f"{attr}={getattr(self, attr)!r}"
            for attr in inspect(self.__class__).columns.keys()
        )
        return f"<{model_name}({attr_str})>"
