"""Models package - lookup result entities."""

from .entities import SocialProfile, CelebrityScore, Celebrity

__all__ = [
    "SocialProfile",
    "CelebrityScore",
    "Celebrity",
]
