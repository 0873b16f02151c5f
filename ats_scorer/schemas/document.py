from __future__ import annotations

from pydantic import BaseModel, Field


class DocumentStats(BaseModel):
    chars: int = Field(ge=0)
    words: int = Field(ge=0)
    lines: int = Field(ge=0)


class NormalizedDocument(BaseModel):
    text: str
    stats: DocumentStats


class SectionFlags(BaseModel):
    education: bool = False
    experience: bool = False
    skills: bool = False
    projects: bool = False


class ContactInfo(BaseModel):
    name: str | None = None
    headline: str | None = None
    email: str | None = None
    phone: str | None = None
    urls: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)


class EducationEntry(BaseModel):
    title: str
    institution: str
    dates: str | None = None
    raw: str
    bullets: list[str] = Field(default_factory=list)


class ExperienceEntry(BaseModel):
    role: str
    organization: str
    dates: str | None = None
    raw: str
    bullets: list[str] = Field(default_factory=list)


class ParsedStructure(BaseModel):
    contact: ContactInfo = Field(default_factory=ContactInfo)
    bullets: list[str] = Field(default_factory=list)
    section_headings: list[str] = Field(default_factory=list)
    section_flags: SectionFlags = Field(default_factory=SectionFlags)
    education_entries: list[EducationEntry] = Field(default_factory=list)
    experience_entries: list[ExperienceEntry] = Field(default_factory=list)
    project_entries: list[ExperienceEntry] = Field(default_factory=list)
