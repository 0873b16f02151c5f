from __future__ import annotations

from pydantic import BaseModel, Field

from ats_scorer.core.config import settings

from .document import DocumentStats, ParsedStructure, SectionFlags
from .matching import CoverageResult, JdMatchResult
from .scoring import ScoreResult


class ResumeAnalysis(BaseModel):
    profile_key: str
    profile_label: str
    stats: DocumentStats
    section_flags: SectionFlags
    structure: ParsedStructure
    coverage: CoverageResult | None = None
    jd_keywords: list[str] = Field(default_factory=list)
    jd_match: JdMatchResult | None = None
    jd_summary: str | None = None
    jd_missing_sorted: list[str] = Field(default_factory=list)
    score: ScoreResult
    summary: list[str] = Field(default_factory=list)
    display_text: str


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(min_length=1, max_length=settings.max_resume_chars)
    profile: str = Field(default="none", max_length=100)
    use_profile: bool = False
    job_description_text: str = Field(default="", max_length=settings.max_jd_chars)
    use_jd: bool = False


class JdKeywordsRequest(BaseModel):
    job_description_text: str = Field(min_length=1, max_length=settings.max_jd_chars)


class JdKeywordsResponse(BaseModel):
    keywords: list[str] = Field(default_factory=list)


class ProfileSummary(BaseModel):
    id: str
    label: str
    categories: dict[str, list[str]] = Field(default_factory=dict)


class ProfilesResponse(BaseModel):
    profiles: list[ProfileSummary] = Field(default_factory=list)
