"""Tests for pusher, notification, push rule response, and login records."""

import pytest

from pushwire.domain.actions import SetTweak, SimpleAction, Tweak
from pushwire.domain.errors import InvalidFieldError, InvalidSimpleActionError
from pushwire.domain.validation import decode_model
from pushwire.records.login import GetLoginTypesResponse, LoginType
from pushwire.records.notifications import (
    GetNotificationsRequest,
    GetNotificationsResponse,
)
from pushwire.records.pushers import Pusher, PusherKind, PushFormat
from pushwire.records.pushrules import DeviceRulesResponse, GetPushRulesResponse, RuleKind
from pushwire.services.codec import encode_record
from tests.conftest import sample_ruleset

PUSHER = {
    "pushkey": "Xp/MzCt8/9DcSNE9cuiaoT5Ac55job3TdLSSmtmYl4A=",
    "kind": "http",
    "app_id": "face.mcapp.appy.prod",
    "app_display_name": "Appy McAppface",
    "device_display_name": "Alice's Phone",
    "lang": "en-US",
    "data": {"url": "https://push-gateway.location.here/_matrix/push/v1/notify"},
}


class TestPusher:
    def test_decode(self) -> None:
        pusher = decode_model(Pusher, PUSHER)
        assert pusher.kind is PusherKind.HTTP
        assert pusher.data.format is None
        assert pusher.profile_tag is None

    def test_encode_omits_absent_optionals(self) -> None:
        assert encode_record(decode_model(Pusher, PUSHER)) == PUSHER

    def test_null_kind_is_kept(self) -> None:
        """A null kind deletes the pusher, so it must survive encoding."""
        pusher = decode_model(Pusher, {**PUSHER, "kind": None})
        assert encode_record(pusher)["kind"] is None

    def test_profile_tag_and_format(self) -> None:
        raw = {**PUSHER, "profile_tag": "xxyyzz", "data": {"format": "event_id_only"}}
        pusher = decode_model(Pusher, raw)
        assert pusher.data.format is PushFormat.EVENT_ID_ONLY
        assert encode_record(pusher) == raw

    def test_unknown_kind(self) -> None:
        with pytest.raises(InvalidFieldError) as exc_info:
            decode_model(Pusher, {**PUSHER, "kind": "sms"})
        assert exc_info.value.field == "kind"


class TestNotifications:
    def test_request_query_params(self) -> None:
        request = GetNotificationsRequest(from_="xyz", limit=10)
        assert request.to_query() == {"from": "xyz", "limit": "10"}

    def test_request_from_wire_alias(self) -> None:
        request = decode_model(GetNotificationsRequest, {"from": "abc", "only": "highlight"})
        assert request.from_ == "abc"
        assert request.to_query() == {"from": "abc", "only": "highlight"}

    def test_response(self) -> None:
        raw = {
            "next_token": "abcdef",
            "notifications": [
                {
                    "actions": ["notify", {"set_tweak": "highlight"}],
                    "event": {"type": "m.room.message", "content": {"body": "hi"}},
                    "read": False,
                    "room_id": "!abcdefg:example.com",
                    "ts": 1475508881945,
                    "profile_tag": "hcbvkzxhcvb",
                }
            ],
        }
        response = decode_model(GetNotificationsResponse, raw)
        assert response.notifications[0].actions == [
            SimpleAction.NOTIFY,
            SetTweak(Tweak.HIGHLIGHT),
        ]
        assert encode_record(response) == raw

    def test_bad_action_in_notification(self) -> None:
        raw = {
            "notifications": [
                {"actions": ["ring"], "event": {}, "read": True, "room_id": "!r", "ts": 1}
            ]
        }
        with pytest.raises(InvalidSimpleActionError) as exc_info:
            decode_model(GetNotificationsResponse, raw)
        assert exc_info.value.loc == ("notifications", 0, "actions", 0)


class TestPushRuleResponses:
    def test_global_alias(self) -> None:
        response = decode_model(GetPushRulesResponse, {"global": sample_ruleset()})
        assert response.global_.sender == []
        wire = encode_record(response)
        assert list(wire) == ["global"]
        assert list(wire["global"]) == ["content", "override", "room", "sender", "underride"]

    def test_device_scope(self) -> None:
        raw = {
            "override": [
                {"actions": ["dont_notify"], "default": False, "enabled": True, "rule_id": "x"}
            ]
        }
        response = decode_model(DeviceRulesResponse, raw)
        assert [rule.rule_id for rule in response.rules_for(RuleKind.OVERRIDE)] == ["x"]
        assert response.rules_for(RuleKind.CONTENT) == []
        assert encode_record(response) == raw

    def test_rule_kind_values(self) -> None:
        assert {k.value for k in RuleKind} == {"override", "underride", "sender", "room", "content"}


class TestLoginTypes:
    def test_flows(self) -> None:
        raw = {"flows": [{"type": "m.login.password"}, {"type": "m.login.token"}]}
        response = decode_model(GetLoginTypesResponse, raw)
        assert [flow.login_type for flow in response.flows] == [
            LoginType.PASSWORD,
            LoginType.TOKEN,
        ]
        assert encode_record(response) == raw
