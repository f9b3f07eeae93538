"""
Data structures (entities) for InfluenceAI.

Uses dataclasses for clean, typed data structures. A Celebrity is built
fresh for every lookup and never stored.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SocialProfile:
    """A social network profile listed in the knowledge panel."""
    name: str
    link: str
    image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"name": self.name, "link": self.link}
        if self.image is not None:
            data["image"] = self.image
        return data


@dataclass
class CelebrityScore:
    """Influence score triple. All values are integers in [0, 100]."""
    familiarity: int = 0
    popularity: int = 0
    q_score: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "familiarity": self.familiarity,
            "popularity": self.popularity,
            "qScore": self.q_score,
        }


@dataclass
class Celebrity:
    """Normalized lookup result for one public figure."""
    name: str
    description: str = ""
    image: str = ""
    facts: List[str] = field(default_factory=list)
    social_profiles: List[SocialProfile] = field(default_factory=list)
    score: CelebrityScore = field(default_factory=CelebrityScore)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the JSON field names the web UI expects."""
        return {
            "name": self.name,
            "description": self.description,
            "image": self.image,
            "facts": list(self.facts),
            "socialProfiles": [p.to_dict() for p in self.social_profiles],
            "score": self.score.to_dict(),
        }
