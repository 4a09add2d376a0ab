from contextlib import asynccontextmanager
import logging

from resume_insight.features.ats_score import load_score_rules
from resume_insight.vocabulary import get_default_vocabulary

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    vocabulary = get_default_vocabulary()
    rules = load_score_rules()
    logger.info(
        "vocabulary_loaded skills=%s stop_words=%s score_bounds=%s..%s",
        len(vocabulary.skills),
        len(vocabulary.stop_words),
        rules.min_score,
        rules.max_score,
    )
    yield
