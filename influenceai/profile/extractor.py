"""
Knowledge panel extraction for InfluenceAI.

The search provider payload is untyped. Every field is checked here before
use; anything of the wrong shape is treated as absent so a partial panel
never raises.
"""

from typing import Any, Dict, List

from influenceai.models.entities import SocialProfile

# Named panel properties appended after the attributes map, in this order
FACT_PROPERTIES = [
    'born',
    'height',
    'net_worth',
    'spouse',
    'children',
    'education',
    'website',
]


def get_knowledge_panel(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return the knowledge panel object, or an empty dict if absent."""
    panel = data.get('knowledge_graph') if isinstance(data, dict) else None
    if isinstance(panel, dict):
        return panel
    return {}


def get_list(container: Dict[str, Any], key: str) -> List[Any]:
    """Return container[key] if it is a list, else an empty list."""
    value = container.get(key)
    if isinstance(value, list):
        return value
    return []


def get_text(container: Dict[str, Any], key: str) -> str:
    """Return container[key] as a string, empty if missing or not text."""
    value = container.get(key)
    if isinstance(value, str):
        return value
    return ''


def format_value(value: Any) -> str:
    """Render a panel value for a fact line."""
    if isinstance(value, list):
        return ', '.join(format_value(v) for v in value)
    return str(value)


def select_image(panel: Dict[str, Any]) -> str:
    """
    Pick the best image URL from the panel.

    Prefers the explicit image, then the thumbnail, then the first header
    image. Returns an empty string when none is present.
    """
    image = get_text(panel, 'image')
    if image:
        return image

    thumbnail = get_text(panel, 'thumbnail')
    if thumbnail:
        return thumbnail

    header_images = get_list(panel, 'header_images')
    if header_images:
        first = header_images[0]
        if isinstance(first, dict):
            return get_text(first, 'image')
        if isinstance(first, str):
            return first

    return ''


def extract_facts(panel: Dict[str, Any]) -> List[str]:
    """
    Build the ordered fact list for a knowledge panel.

    An explicit non-empty ``facts`` list wins and is returned as-is.
    Otherwise facts come from the ``attributes`` map followed by the
    named properties in FACT_PROPERTIES.
    """
    explicit = get_list(panel, 'facts')
    if explicit:
        return [fact if isinstance(fact, str) else format_value(fact) for fact in explicit]

    facts: List[str] = []

    attributes = panel.get('attributes')
    if isinstance(attributes, dict):
        for key, value in attributes.items():
            if value:
                facts.append(f"{key}: {format_value(value)}")

    for prop in FACT_PROPERTIES:
        value = panel.get(prop)
        if value:
            facts.append(f"{prop.replace('_', ' ')}: {format_value(value)}")

    return facts


def extract_social_profiles(panel: Dict[str, Any]) -> List[SocialProfile]:
    """Copy social profiles from the panel, preserving order."""
    profiles = []
    for entry in get_list(panel, 'profiles'):
        if not isinstance(entry, dict):
            continue
        image = entry.get('image')
        profiles.append(SocialProfile(
            name=get_text(entry, 'name'),
            link=get_text(entry, 'link'),
            image=image if isinstance(image, str) else None,
        ))
    return profiles


def has_facts(panel: Dict[str, Any]) -> bool:
    """True if the panel has explicit facts or a non-empty attributes map."""
    if get_list(panel, 'facts'):
        return True
    attributes = panel.get('attributes')
    return isinstance(attributes, dict) and len(attributes) > 0
