"""Collection metadata: name, type and creation options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CollectionType(str, Enum):
    """Whether a definition is a plain collection or a view."""

    DEFAULT = "TypeDefaultCollection"
    VIEW = "TypeViewCollection"


class CollectionOption(str, Enum):
    """Options accepted when creating a collection."""

    CAPPED = "capped"
    CAPPED_SIZE = "size"
    EXPIRED_AFTER_SECONDS = "expiredAfterSeconds"


def all_option_keys() -> list[CollectionOption]:
    return [
        CollectionOption.CAPPED,
        CollectionOption.CAPPED_SIZE,
        CollectionOption.EXPIRED_AFTER_SECONDS,
    ]


@dataclass
class Metadata:
    """Basic information about a collection."""

    name: str
    options: dict[CollectionOption, Any] | None = None
    type: CollectionType = CollectionType.DEFAULT

    def _ensure_options(self) -> dict[CollectionOption, Any]:
        if self.options is None:
            self.options = {}
        return self.options

    def capped(self, size: int) -> Metadata:
        """Make the collection capped at the given size in bytes."""
        options = self._ensure_options()
        if CollectionOption.CAPPED in options:
            raise ValueError(
                "Cannot add capped option, another option already exists "
                f"on collection: {self.name}"
            )
        options[CollectionOption.CAPPED] = True
        options[CollectionOption.CAPPED_SIZE] = size
        return self

    def ttl(self, expired_after: int) -> Metadata:
        """Expire documents after the given number of seconds."""
        options = self._ensure_options()
        if CollectionOption.EXPIRED_AFTER_SECONDS in options:
            raise ValueError(
                "Cannot add TTL option, another option already exists "
                f"on collection: {self.name}"
            )
        options[CollectionOption.EXPIRED_AFTER_SECONDS] = expired_after
        return self

    def as_view(self) -> Metadata:
        self.type = CollectionType.VIEW
        return self


def init_metadata(name: str) -> Metadata:
    return Metadata(name)