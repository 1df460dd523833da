from __future__ import annotations

import logging

from pydantic import ValidationError

from atscore.core.config.scoring import get_scoring_value
from atscore.schemas.scoring import ScoringWeights

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS = ScoringWeights()


def load_scoring_weights() -> ScoringWeights:
    """Configured weights, or the defaults when config is missing or invalid."""
    try:
        raw = get_scoring_value("weights")
    except RuntimeError as exc:
        logger.warning("scoring_weights_load_failed using_defaults=true error=%s", exc)
        return DEFAULT_WEIGHTS.model_copy()

    if raw is None:
        return DEFAULT_WEIGHTS.model_copy()

    try:
        return ScoringWeights.model_validate(raw)
    except ValidationError as exc:
        logger.warning("scoring_weights_invalid using_defaults=true errors=%s", exc.error_count())
        return DEFAULT_WEIGHTS.model_copy()
