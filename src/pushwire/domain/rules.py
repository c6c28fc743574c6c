"""Push rules and the five-category ruleset aggregate.

Scalar fields map structurally; ``actions`` and ``conditions`` delegate to
the hybrid codecs in :mod:`pushwire.domain.actions` and
:mod:`pushwire.domain.conditions`.

Omission policy on encode:

- All five categories are always emitted, in the order content, override,
  room, sender, underride.  A category missing on decode re-encodes as ``[]``.
- ``conditions`` and ``pattern`` are omitted when ``None``.

No cross-category rules are enforced (e.g. ``pattern`` on a non-content
rule is accepted); that belongs to rule evaluation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from pushwire.domain.actions import ActionField
from pushwire.domain.conditions import ConditionField
from pushwire.domain.validation import decode_model

RULESET_CATEGORIES: tuple[str, ...] = ("content", "override", "room", "sender", "underride")


class PushRule(BaseModel):
    """A named condition-action pair."""

    model_config = {"frozen": True}

    actions: list[ActionField]
    default: bool
    enabled: bool
    rule_id: str
    # Only meaningful for override and underride rules.
    conditions: list[ConditionField] | None = None
    # Only meaningful for content rules.
    pattern: str | None = None


class Ruleset(BaseModel):
    """A user's push rules, partitioned into five priority categories."""

    model_config = {"frozen": True}

    content: list[PushRule] = Field(default_factory=list)
    override: list[PushRule] = Field(default_factory=list)
    room: list[PushRule] = Field(default_factory=list)
    sender: list[PushRule] = Field(default_factory=list)
    underride: list[PushRule] = Field(default_factory=list)

    def categories(self) -> dict[str, list[PushRule]]:
        """Return the categories in their fixed protocol order."""
        return {name: getattr(self, name) for name in RULESET_CATEGORIES}


# ---------------------------------------------------------------------------
# Codec entry points
# ---------------------------------------------------------------------------


def decode_push_rule(raw: Any) -> PushRule:
    """Decode a single push rule object."""
    return decode_model(PushRule, raw)


def encode_push_rule(rule: PushRule) -> dict[str, Any]:
    return rule.model_dump(mode="json", exclude_none=True)


def decode_ruleset(raw: Any) -> Ruleset:
    """Decode a ruleset; absent categories decode as empty sequences."""
    return decode_model(Ruleset, raw)


def encode_ruleset(ruleset: Ruleset) -> dict[str, Any]:
    return ruleset.model_dump(mode="json", exclude_none=True)
