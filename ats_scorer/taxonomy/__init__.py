from functools import lru_cache

from ats_scorer.core.config import settings

from .local_taxonomy import DEFAULT_TAXONOMY_PATH, load_taxonomy
from .models import NONE_PROFILE_KEY, ProfileDefinition, Taxonomy


@lru_cache(maxsize=1)
def get_default_taxonomy() -> Taxonomy:
    return load_taxonomy(settings.taxonomy_path)


__all__ = [
    "NONE_PROFILE_KEY",
    "ProfileDefinition",
    "Taxonomy",
    "DEFAULT_TAXONOMY_PATH",
    "load_taxonomy",
    "get_default_taxonomy",
]
