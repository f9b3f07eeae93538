"""Turn a raw search provider response into a Celebrity record."""

from typing import Any, Dict

from influenceai.models.entities import Celebrity
from influenceai.profile.extractor import (
    extract_facts,
    extract_social_profiles,
    get_knowledge_panel,
    get_text,
    select_image,
)
from influenceai.score.calculator import calculate_celebrity_score


def build_celebrity(data: Dict[str, Any], query: str) -> Celebrity:
    """
    Normalize a provider response for the given search name.

    The panel title is used as the display name when a panel exists;
    otherwise the query is echoed back.
    """
    if not isinstance(data, dict):
        data = {}
    panel = get_knowledge_panel(data)

    name = query
    if panel:
        name = get_text(panel, 'title') or query

    return Celebrity(
        name=name,
        description=get_text(panel, 'description'),
        image=select_image(panel),
        facts=extract_facts(panel),
        social_profiles=extract_social_profiles(panel),
        score=calculate_celebrity_score(data, panel),
    )
