"""Login flow discovery records."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class LoginType(StrEnum):
    PASSWORD = "m.login.password"
    TOKEN = "m.login.token"


class LoginFlow(BaseModel):
    """A login type supported by the homeserver (wire key ``type``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    login_type: LoginType = Field(alias="type")


class GetLoginTypesResponse(BaseModel):
    model_config = {"frozen": True}

    flows: list[LoginFlow]
