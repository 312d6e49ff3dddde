from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from sunway.collectors.base import RandomIdGenerator

UUID_PATTERN = r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"


class RequestContext(BaseModel):
    """Identifier and timestamp generated while rendering one response."""

    request_id: str = Field(pattern=UUID_PATTERN)
    timestamp: str

    @classmethod
    def create(
        cls,
        id_generator: RandomIdGenerator,
        now: datetime | None = None,
    ) -> RequestContext:
        moment = now or datetime.now()
        # %c is the locale's default date and time representation
        return cls(request_id=id_generator.new_id(), timestamp=moment.strftime("%c"))
