from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from herb_graph import ALL_TRADITIONS, HerbEdge, Tradition
from herb_matcher import HerbMatch


class Platform(str, Enum):
    INSTAGRAM = "Instagram"
    FACEBOOK = "Facebook"
    TIKTOK = "TikTok"


class AgentRequest(BaseModel):
    user_profile: str = Field(min_length=1)
    symptoms: str = Field(min_length=1)
    goals: str = Field(min_length=1)
    restrictions: Optional[str] = None
    traditions: List[Tradition] = Field(default_factory=list, validate_default=True)
    brand_voice: str = Field(min_length=1)
    campaign_goal: str = Field(min_length=1)
    target_platforms: List[Platform] = Field(min_length=1)
    key_dates: Optional[str] = None
    community_theme: str = Field(min_length=1)
    community_ask: str = Field(min_length=1)
    highlight_count: int = Field(default=3, ge=1, le=6)

    @field_validator("traditions")
    @classmethod
    def default_to_all_traditions(cls, value):
        return value or list(ALL_TRADITIONS)


class HerbMatchOut(BaseModel):
    id: str
    name: str
    latin_name: str
    score: int
    traditions: List[Tradition]
    actions: List[str]
    uses: List[str]
    cautions: List[str]
    pairings: List[str]
    matched_keywords: List[str]
    contraindicated: bool

    @classmethod
    def from_match(cls, match: HerbMatch) -> "HerbMatchOut":
        herb = match.herb
        return cls(
            id=herb.id,
            name=herb.name,
            latin_name=herb.latin_name,
            score=match.score,
            traditions=list(herb.traditions),
            actions=list(herb.actions),
            uses=list(herb.uses),
            cautions=list(herb.cautions),
            pairings=list(herb.pairings),
            matched_keywords=list(match.matched_keywords),
            contraindicated=match.contraindicated,
        )


class KnowledgeEdge(BaseModel):
    source: str
    target: str
    label: str

    @classmethod
    def from_edge(cls, edge: HerbEdge) -> "KnowledgeEdge":
        return cls(source=edge.source, target=edge.target, label=edge.label)


class AgentResponse(BaseModel):
    herbalist: str
    educator: str
    marketer: str
    community: str
    herb_matches: List[HerbMatchOut]
    knowledge_edges: List[KnowledgeEdge]
