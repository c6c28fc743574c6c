"""Push rule retrieval responses.

The global scope wraps a full :class:`~pushwire.domain.rules.Ruleset`;
the device scope is a mapping from rule kind to rules.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel

from pushwire.domain.rules import PushRule, Ruleset


class RuleKind(StrEnum):
    """The five push rule categories, in priority order."""

    OVERRIDE = "override"
    UNDERRIDE = "underride"
    SENDER = "sender"
    ROOM = "room"
    CONTENT = "content"


class GetPushRulesResponse(BaseModel):
    """All push rulesets for a user (wire key ``global``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    global_: Ruleset = Field(alias="global")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DeviceRulesResponse(RootModel[dict[RuleKind, list[PushRule]]]):
    """Push rules in the device scope of one profile tag."""

    model_config = {"frozen": True}

    def rules_for(self, kind: RuleKind) -> list[PushRule]:
        return self.root.get(kind, [])

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
