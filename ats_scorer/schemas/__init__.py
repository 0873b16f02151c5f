from .analysis import (
    AnalyzeRequest,
    JdKeywordsRequest,
    JdKeywordsResponse,
    ProfileSummary,
    ProfilesResponse,
    ResumeAnalysis,
)
from .document import (
    ContactInfo,
    DocumentStats,
    EducationEntry,
    ExperienceEntry,
    NormalizedDocument,
    ParsedStructure,
    SectionFlags,
)
from .matching import CategoryStat, CoverageResult, JdMatchResult, KeywordPresence
from .scoring import ScoreFeatures, ScoreResult

__all__ = [
    "DocumentStats",
    "NormalizedDocument",
    "SectionFlags",
    "ContactInfo",
    "EducationEntry",
    "ExperienceEntry",
    "ParsedStructure",
    "CategoryStat",
    "KeywordPresence",
    "CoverageResult",
    "JdMatchResult",
    "ScoreFeatures",
    "ScoreResult",
    "ResumeAnalysis",
    "AnalyzeRequest",
    "JdKeywordsRequest",
    "JdKeywordsResponse",
    "ProfileSummary",
    "ProfilesResponse",
]
