import logging
from contextlib import asynccontextmanager

from ats_scorer.services import get_default_analyzer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    analyzer = get_default_analyzer()
    logger.info(
        "taxonomy_loaded profiles=%d synonyms=%d vocab=%d",
        len(analyzer.taxonomy.profiles),
        len(analyzer.taxonomy.synonyms),
        len(analyzer.taxonomy.skill_vocab),
    )
    yield
