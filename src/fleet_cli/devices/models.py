"""Data models for supported device types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DeviceTypeState(str, Enum):
    """Release state of a device type as reported by the API."""

    BETA = "BETA"
    RELEASED = "RELEASED"
    DISCONTINUED = "DISCONTINUED"


class DeviceTypeField(str, Enum):
    """Fields that can be selected for device type output."""

    SLUG = "slug"
    ALIASES = "aliases"
    ARCH = "arch"
    STATE = "state"
    NAME = "name"


# Output columns, before and after --verbose
BASE_FIELDS: tuple[DeviceTypeField, ...] = (DeviceTypeField.SLUG, DeviceTypeField.NAME)
VERBOSE_FIELDS: tuple[DeviceTypeField, ...] = (DeviceTypeField.ALIASES, DeviceTypeField.ARCH, DeviceTypeField.STATE)


@dataclass(frozen=True)
class DeviceType:
    """A device type record as fetched from the API.

    Attributes:
        slug: Unique identifier (e.g. "raspberrypi4-64")
        name: Display name
        aliases: Alternative slugs, in API order
        arch: CPU architecture (e.g. "aarch64"), None when not reported
        state: Release state exactly as reported, None when not reported
        reported_fields: Keys present in the API payload, so a field the API
            sent as null can be told apart from one it left out
    """

    slug: str
    name: str | None = None
    aliases: tuple[str, ...] = field(default_factory=tuple)
    arch: str | None = None
    state: str | None = None
    reported_fields: frozenset[str] = field(default=frozenset(), compare=False, repr=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> DeviceType:
        """Build a record from a raw device type dict."""
        raw_aliases = data.get("aliases") or []
        if isinstance(raw_aliases, str):
            raw_aliases = [raw_aliases]
        state = data.get("state")
        return cls(
            slug=str(data.get("slug", "")),
            name=data.get("name"),
            aliases=tuple(str(alias) for alias in raw_aliases),
            arch=data.get("arch"),
            state=str(state) if state is not None else None,
            reported_fields=frozenset(data),
        )

    @property
    def is_discontinued(self) -> bool:
        return self.state == DeviceTypeState.DISCONTINUED.value

    def distinct_aliases(self) -> list[str]:
        """Aliases other than the record's own slug, in original order."""
        return [alias for alias in self.aliases if alias != self.slug]
