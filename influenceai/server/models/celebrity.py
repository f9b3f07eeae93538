from typing import List, Optional

from pydantic import BaseModel, Field

from influenceai.models.entities import Celebrity


class SocialProfileModel(BaseModel):
    name: str
    link: str
    image: Optional[str] = None


class CelebrityScoreModel(BaseModel):
    familiarity: int = Field(ge=0, le=100)
    popularity: int = Field(ge=0, le=100)
    q_score: int = Field(ge=0, le=100, alias="qScore")

    model_config = {"populate_by_name": True}


class CelebrityResponse(BaseModel):
    name: str
    description: str = ""
    image: str = ""
    facts: List[str] = []
    social_profiles: List[SocialProfileModel] = Field(default_factory=list, alias="socialProfiles")
    score: CelebrityScoreModel

    model_config = {"populate_by_name": True}

    @classmethod
    def from_entity(cls, celebrity: Celebrity) -> "CelebrityResponse":
        return cls.model_validate(celebrity.to_dict())
