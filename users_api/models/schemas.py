from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class UserPayload(BaseModel):
    # Clients may send an id of any shape; it is never used.
    id: Any = None
    name: str | None = None
