from functools import lru_cache

from .analysis_service import EmptyDocumentError, ResumeAnalyzer, truncate_display_text


@lru_cache(maxsize=1)
def get_default_analyzer() -> ResumeAnalyzer:
    return ResumeAnalyzer()


__all__ = ["EmptyDocumentError", "ResumeAnalyzer", "get_default_analyzer", "truncate_display_text"]
