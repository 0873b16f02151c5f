from __future__ import annotations

from pydantic import BaseModel, Field


class CategoryStat(BaseModel):
    category: str
    present: int = Field(ge=0)
    total: int = Field(ge=0)


class KeywordPresence(BaseModel):
    category: str
    keyword: str
    present: bool


class CoverageResult(BaseModel):
    category_stats: list[CategoryStat] = Field(default_factory=list)
    overall_coverage: float = Field(default=0.0, ge=0.0, le=1.0)
    detailed: list[KeywordPresence] = Field(default_factory=list)
    total_keywords: int = Field(default=0, ge=0)


class JdMatchResult(BaseModel):
    match_ratio: float = Field(default=0.0, ge=0.0, le=1.0)
    missing: list[str] = Field(default_factory=list)
    overlap_count: int = Field(default=0, ge=0)
