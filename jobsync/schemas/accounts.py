from __future__ import annotations

from datetime import datetime

from .base import FrozenCamelModel


class UserRecord(FrozenCamelModel):
    id: str
    email: str
    name: str = ""
    created_at: datetime
