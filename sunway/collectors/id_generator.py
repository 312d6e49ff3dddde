from __future__ import annotations

import uuid

from sunway.collectors.base import RandomIdGenerator


class UuidGenerator(RandomIdGenerator):
    """Random (version 4) UUIDs in canonical 8-4-4-4-12 form."""

    def new_id(self) -> str:
        return str(uuid.uuid4())
