"""Data models for application and device variables."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class VariableScope(str, Enum):
    """What a variable set is attached to."""

    APPLICATION = "application"
    DEVICE = "device"


class VariableKind(str, Enum):
    """User-defined environment variable or reserved config variable."""

    ENVIRONMENT = "environment"
    CONFIG = "config"


class EnvVarField(str, Enum):
    """Fields shown for every variable, whatever its scope or kind."""

    ID = "id"
    NAME = "name"
    VALUE = "value"


ENV_VAR_FIELDS: tuple[EnvVarField, ...] = (EnvVarField.ID, EnvVarField.NAME, EnvVarField.VALUE)


@dataclass(frozen=True)
class ApplicationTarget:
    """Variables of an application, addressed by name or slug."""

    slug: str
    scope = VariableScope.APPLICATION

    @property
    def identifier(self) -> str:
        return self.slug

    def describe(self) -> str:
        return f"application '{self.slug}'"


@dataclass(frozen=True)
class DeviceTarget:
    """Variables of a single device, addressed by UUID."""

    uuid: str
    scope = VariableScope.DEVICE

    @property
    def identifier(self) -> str:
        return self.uuid

    def describe(self) -> str:
        return f"device '{self.uuid}'"


VariableTarget = Union[ApplicationTarget, DeviceTarget]


def target_from_selectors(application: str | None, device: str | None) -> VariableTarget | None:
    """Turn the --application / --device pair into a single target.

    Returns None when neither selector is set. Both being set is rejected
    by the argument parser before this is called.
    """
    if application:
        return ApplicationTarget(application)
    if device:
        return DeviceTarget(device)
    return None


@dataclass(frozen=True)
class EnvironmentVariable:
    """An environment or config variable record.

    Attributes:
        id: Numeric API identifier, None when not reported
        name: Variable name
        value: Variable value, None when not reported
        reported_fields: Keys present in the API payload
    """

    id: int | None
    name: str | None
    value: str | None
    reported_fields: frozenset[str] = field(default=frozenset(), compare=False, repr=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> EnvironmentVariable:
        """Build a record from a raw variable dict, ignoring extra keys."""
        raw_id = data.get("id")
        return cls(
            id=int(raw_id) if raw_id is not None else None,
            name=data.get("name"),
            value=data.get("value"),
            reported_fields=frozenset(data),
        )
