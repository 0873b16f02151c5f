from __future__ import annotations

from pydantic import BaseModel, Field


class ScoreFeatures(BaseModel):
    has_education: bool = False
    has_experience: bool = False
    has_skills: bool = False
    word_count: int = Field(default=0, ge=0)
    line_count: int = Field(default=0, ge=0)
    profile_coverage: float = Field(default=0.0, ge=0.0, le=1.0)
    jd_match: float = Field(default=0.0, ge=0.0, le=1.0)
    include_profile: bool = False
    jd_provided: bool = False


class ScoreResult(BaseModel):
    value: int = Field(ge=0, le=100)
    explanation: str
