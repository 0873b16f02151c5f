from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)

NONE_PROFILE_KEY = "none"


@dataclass(frozen=True)
class ProfileDefinition:
    key: str
    label: str
    categories: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def keyword_count(self) -> int:
        return sum(len(keywords) for keywords in self.categories.values())


@dataclass(frozen=True)
class Taxonomy:
    """Read-only keyword configuration shared by every analysis."""

    profiles: Mapping[str, ProfileDefinition]
    synonyms: Mapping[str, frozenset[str]]
    stopwords: frozenset[str]
    locations: tuple[str, ...] = ()
    skill_vocab: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        vocab: set[str] = set()
        for profile in self.profiles.values():
            for keywords in profile.categories.values():
                vocab.update(keyword.lower() for keyword in keywords)
        for canonical, alternates in self.synonyms.items():
            vocab.add(canonical.lower())
            vocab.update(alt.lower() for alt in alternates)
        object.__setattr__(self, "skill_vocab", frozenset(vocab))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Taxonomy":
        profiles: dict[str, ProfileDefinition] = {}
        for key, body in (raw.get("profiles") or {}).items():
            profile_key = str(key).strip()
            categories = {
                str(category): tuple(str(keyword).strip().lower() for keyword in keywords or [])
                for category, keywords in (body.get("categories") or {}).items()
            }
            profiles[profile_key] = ProfileDefinition(
                key=profile_key,
                label=str(body.get("label") or profile_key),
                categories=MappingProxyType(categories),
            )
        if NONE_PROFILE_KEY not in profiles:
            profiles[NONE_PROFILE_KEY] = ProfileDefinition(key=NONE_PROFILE_KEY, label="no specific profile")

        synonyms = {
            str(canonical).strip().lower(): frozenset(str(alt).strip().lower() for alt in alternates or [])
            for canonical, alternates in (raw.get("synonyms") or {}).items()
        }
        return cls(
            profiles=MappingProxyType(profiles),
            synonyms=MappingProxyType(synonyms),
            stopwords=_lower_set(raw.get("stopwords") or []),
            locations=tuple(str(place).strip().lower() for place in raw.get("locations") or []),
        )

    def get_profile(self, key: str | None) -> ProfileDefinition:
        profile = self.profiles.get((key or NONE_PROFILE_KEY).strip())
        if profile is None:
            logger.warning("taxonomy_unknown_profile key=%s", key)
            return self.profiles[NONE_PROFILE_KEY]
        return profile

    def synonyms_for(self, keyword: str) -> frozenset[str]:
        return self.synonyms.get(keyword.lower(), frozenset())


def _lower_set(values: Iterable[Any]) -> frozenset[str]:
    return frozenset(str(value).strip().lower() for value in values if str(value).strip())
