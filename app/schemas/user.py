"""Pydantic schemas for user payloads and responses."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """Body accepted by the create and update endpoints.

    Fields are optional at the schema level so that the validator, not the
    request parser, decides which missing field to report. Identifiers and
    timestamps sent by the client are ignored.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None


class UserRead(BaseModel):
    """Representation returned by the API for persisted users.

    The stored password credential is intentionally not part of this model.
    """

    id: uuid.UUID
    name: str
    email: str
    username: str | None = None
    created_at: datetime
    updated_at: datetime
    last_login: datetime | None = None
    is_active: bool
    groups: list[uuid.UUID] | None = None
    metadata: dict[str, Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("metadata_", "metadata"),
        serialization_alias="metadata",
    )

    model_config = ConfigDict(from_attributes=True)


class UserListResponse(BaseModel):
    """One page of users with pagination metadata."""

    users: list[UserRead]
    page: int
    limit: int
    total_users: int


class MessageResponse(BaseModel):
    message: str
