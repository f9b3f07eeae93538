"""InfluenceAI - search-backed influence scores for public figures."""

__version__ = "1.0.0"
