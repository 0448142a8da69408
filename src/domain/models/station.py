from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Station:
    key: str
    lines: tuple[int, ...]
    translations: Mapping[str, str] = field(default_factory=dict, hash=False)
    relations: tuple[str, ...] = ()
    location: GeoPoint | None = None

    def __post_init__(self) -> None:
        # Read-only copy: graph snapshots are shared between searches.
        object.__setattr__(
            self, "translations", MappingProxyType(dict(self.translations))
        )

    def name(self, locales: Sequence[str] = ()) -> str:
        """First non-empty translation in locale order, else the raw key."""

        for locale in locales:
            value = (self.translations.get(locale) or "").strip()
            if value:
                return value
        return self.key
