from __future__ import annotations

from collections.abc import Mapping

from ats_scorer.taxonomy import Taxonomy


class KeywordMatcher:
    """Synonym-aware substring matcher.

    Matching is plain containment on lowercased text with no word boundaries,
    so keywords glued to neighbouring words by the extractor still count.
    """

    def __init__(self, synonyms: Mapping[str, frozenset[str]]) -> None:
        self._synonyms = synonyms

    @classmethod
    def from_taxonomy(cls, taxonomy: Taxonomy) -> "KeywordMatcher":
        return cls(taxonomy.synonyms)

    def vocabulary(self, keyword: str) -> frozenset[str]:
        key = keyword.lower()
        return frozenset({key}) | self._synonyms.get(key, frozenset())

    def present(self, keyword: str, text: str) -> bool:
        return self.present_in_lowered(keyword, text.lower())

    def present_in_lowered(self, keyword: str, lowered_text: str) -> bool:
        key = keyword.lower()
        if key in lowered_text:
            return True
        return any(alt.lower() in lowered_text for alt in self._synonyms.get(key, ()))
