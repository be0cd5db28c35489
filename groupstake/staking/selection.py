"""
Random validator group picker.
"""
import random
from typing import List, Optional
import logging
from ..protocol.types.validator import ValidatorGroup
from ..protocol.config.params import NetworkConfig, CURRENT_NETWORK
from .stats import get_group_stats

logger = logging.getLogger(__name__)


def pick_random_group(
    groups: Optional[List[ValidatorGroup]],
    rng: random.Random,
    min_score: Optional[float] = None,
    config: NetworkConfig = None,
) -> Optional[ValidatorGroup]:
    """
    Picks uniformly among groups whose average score reaches `min_score`.

    Candidates are ordered by score before drawing, so a seeded `rng`
    gives the same pick for the same groups. Returns None when no group
    qualifies.
    """
    config = config or CURRENT_NETWORK
    if min_score is None:
        min_score = config.min_group_score_for_random
    if not groups:
        return None

    scored = [(get_group_stats(g, config).avg_score, g) for g in groups]
    scored.sort(key=lambda item: item[0], reverse=True)
    candidates = [g for score, g in scored if score >= min_score]
    if not candidates:
        logger.debug(f"No group among {len(groups)} scores at least {min_score}")
        return None
    return rng.choice(candidates)
