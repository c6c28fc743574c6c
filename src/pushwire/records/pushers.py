"""Pusher registration records."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class PusherKind(StrEnum):
    """Which kind a pusher is."""

    HTTP = "http"
    EMAIL = "email"


class PushFormat(StrEnum):
    """A special format the homeserver uses when sending to a push gateway."""

    EVENT_ID_ONLY = "event_id_only"


class PusherData(BaseModel):
    """Information for the pusher implementation itself."""

    model_config = {"frozen": True}

    # Required when the pusher kind is http.
    url: str | None = None
    format: PushFormat | None = None


class Pusher(BaseModel):
    """Defines a pusher.

    Attributes:
        pushkey: Unique identifier for this pusher (max 512 bytes).
        kind: ``None`` in a set-pusher call deletes the pusher.
        app_id: Reverse-DNS style application identifier (max 64 chars).
        profile_tag: Selects the set of device-specific rules to execute.
        lang: Preferred language for notifications, e.g. ``en-US``.
    """

    model_config = {"frozen": True}

    pushkey: str
    kind: PusherKind | None
    app_id: str
    app_display_name: str
    device_display_name: str
    profile_tag: str | None = None
    lang: str
    data: PusherData

    def to_wire(self) -> dict[str, object]:
        """Encode for the wire: ``kind`` is always sent, ``profile_tag`` only when set."""
        encoded = self.model_dump(mode="json", exclude={"profile_tag"})
        if self.profile_tag is not None:
            encoded["profile_tag"] = self.profile_tag
        encoded["data"] = self.data.model_dump(mode="json", exclude_none=True)
        return encoded
