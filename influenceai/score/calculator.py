"""
Influence score calculation for InfluenceAI.

All scoring flows through calculate_celebrity_score(). The function is pure:
the same provider payload always produces the same score triple.

Familiarity measures how well documented an entity is (knowledge panel
completeness). Popularity measures current search and news volume.
The composite q-score is their product normalized back to 0-100.
"""

from typing import Any, Dict, Optional

from influenceai.models.entities import CelebrityScore
from influenceai.profile.extractor import (
    get_knowledge_panel,
    get_list,
    get_text,
    has_facts,
    select_image,
)

MAX_SCORE = 100

# Familiarity weights
PANEL_BASE = 50
NO_PANEL_ORGANIC_BONUS = 20
DESCRIPTION_BONUS = 10
PROFILES_BONUS = 10
FACTS_BONUS = 10
IMAGE_BONUS = 5

# Popularity weights: (points per item, cap)
ORGANIC_WEIGHT = (5, 30)
NEWS_WEIGHT = (4, 20)
PROFILE_WEIGHT = (5, 20)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, like Math.round."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def clamp_score(value: float) -> int:
    """Round and clamp a raw score into [0, MAX_SCORE]."""
    return max(0, min(MAX_SCORE, round_half_up(value)))


def _weighted_count(count: int, weight) -> int:
    per_item, cap = weight
    return min(cap, count * per_item)


def calculate_familiarity(data: Dict[str, Any], panel: Dict[str, Any]) -> int:
    """
    Score how well documented the entity is.

    A non-empty panel starts at PANEL_BASE and earns bonuses for description,
    social profiles, facts and an image. Without a panel, organic results
    alone are worth NO_PANEL_ORGANIC_BONUS.
    """
    score = 0
    if panel:
        score += PANEL_BASE
        if get_text(panel, 'description'):
            score += DESCRIPTION_BONUS
        if get_list(panel, 'profiles'):
            score += PROFILES_BONUS
        if has_facts(panel):
            score += FACTS_BONUS
        if select_image(panel):
            score += IMAGE_BONUS
    elif get_list(data, 'organic_results'):
        score += NO_PANEL_ORGANIC_BONUS

    return clamp_score(score)


def calculate_popularity(data: Dict[str, Any], panel: Dict[str, Any]) -> int:
    """Score search and news volume, plus social reach."""
    score = (
        _weighted_count(len(get_list(data, 'organic_results')), ORGANIC_WEIGHT)
        + _weighted_count(len(get_list(data, 'news_results')), NEWS_WEIGHT)
        + _weighted_count(len(get_list(panel, 'profiles')), PROFILE_WEIGHT)
    )
    return clamp_score(score)


def calculate_q_score(familiarity: int, popularity: int) -> int:
    """Composite score. Both inputs are <= 100 so the result is too."""
    return round_half_up(familiarity * popularity / 100)


def calculate_celebrity_score(
    data: Dict[str, Any],
    panel: Optional[Dict[str, Any]] = None,
) -> CelebrityScore:
    """
    Calculate the score triple for a provider response.

    Args:
        data: Raw search provider response
        panel: Knowledge panel already pulled from ``data``; looked up if omitted

    Returns:
        CelebrityScore with familiarity, popularity and q_score
    """
    if not isinstance(data, dict):
        data = {}
    if panel is None:
        panel = get_knowledge_panel(data)

    familiarity = calculate_familiarity(data, panel)
    popularity = calculate_popularity(data, panel)

    return CelebrityScore(
        familiarity=familiarity,
        popularity=popularity,
        q_score=calculate_q_score(familiarity, popularity),
    )
