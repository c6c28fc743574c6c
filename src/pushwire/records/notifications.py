"""Notification pagination records.

The triggering event is carried as an opaque JSON object; event parsing is
left to the consumer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pushwire.domain.actions import ActionField


class Notification(BaseModel):
    """An event the user has been, or would have been, notified about."""

    model_config = {"frozen": True}

    actions: list[ActionField]
    event: dict[str, Any]
    profile_tag: str | None = None
    read: bool
    room_id: str
    ts: int = Field(ge=0)


class GetNotificationsRequest(BaseModel):
    """Query parameters for paginating notifications.

    ``only="highlight"`` restricts results to events that had the
    ``highlight`` tweak set.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str | None = Field(default=None, alias="from")
    limit: int | None = Field(default=None, ge=0)
    only: str | None = None

    def to_query(self) -> dict[str, str]:
        """Return the query-string parameters, omitting absent ones."""
        params = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return {key: str(value) for key, value in params.items()}


class GetNotificationsResponse(BaseModel):
    model_config = {"frozen": True}

    # Absent when there are no more results.
    next_token: str | None = None
    notifications: list[Notification]
