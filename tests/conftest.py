"""Shared pytest fixtures and sample payloads for pushwire tests."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest
from click.testing import CliRunner

from pushwire.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """Telemetry is a ContextVar; keep ``-v`` runs from leaking into later tests."""
    yield
    disable_telemetry()


# ---------------------------------------------------------------------------
# Sample payloads
# ---------------------------------------------------------------------------


def sample_ruleset() -> dict[str, Any]:
    """A ruleset shaped like a homeserver's default global rules (sender omitted)."""
    return {
        "content": [
            {
                "actions": [
                    "notify",
                    {"set_tweak": "sound", "value": "default"},
                    {"set_tweak": "highlight"},
                ],
                "default": True,
                "enabled": True,
                "pattern": "alice",
                "rule_id": ".m.rule.contains_user_name",
            }
        ],
        "override": [
            {
                "actions": ["dont_notify"],
                "conditions": [],
                "default": True,
                "enabled": False,
                "rule_id": ".m.rule.master",
            },
            {
                "actions": ["dont_notify"],
                "conditions": [
                    {"key": "content.msgtype", "kind": "event_match", "pattern": "m.notice"}
                ],
                "default": True,
                "enabled": True,
                "rule_id": ".m.rule.suppress_notices",
            },
        ],
        "room": [],
        "underride": [
            {
                "actions": [
                    "notify",
                    {"set_tweak": "sound", "value": "ring"},
                    {"set_tweak": "highlight", "value": False},
                ],
                "conditions": [
                    {"key": "type", "kind": "event_match", "pattern": "m.call.invite"}
                ],
                "default": True,
                "enabled": True,
                "rule_id": ".m.rule.call",
            },
            {
                "actions": ["notify", {"set_tweak": "highlight", "value": False}],
                "conditions": [
                    {"kind": "room_member_count", "is": "2"},
                    {"kind": "contains_display_name"},
                    {"kind": "sender_notification_permission", "key": "room"},
                ],
                "default": True,
                "enabled": True,
                "rule_id": ".m.rule.room_one_to_one",
            },
        ],
    }
