from .coverage import compute_profile_coverage
from .jd_match import compute_jd_match, extract_jd_keywords
from .keywords import KeywordMatcher

__all__ = [
    "KeywordMatcher",
    "compute_profile_coverage",
    "extract_jd_keywords",
    "compute_jd_match",
]
