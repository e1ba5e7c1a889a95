from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from cricket_league.core.utils import loaded_relation


class SponsorIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    logo_url: Optional[str] = Field(None, max_length=255)
    franchise_id: int


class SponsorUpdate(SponsorIn):
    sponsor_id: int


class SponsorDto(BaseModel):
    sponsor_id: int
    name: str
    logo_url: Optional[str] = None
    franchise_id: int
    franchise_name: str = "Unknown"
    team_count: int = 0


def to_sponsor_dto(sponsor) -> SponsorDto:
    franchise = loaded_relation(sponsor, "franchise")
    return SponsorDto(
        sponsor_id=sponsor.sponsor_id,
        name=sponsor.name,
        logo_url=sponsor.logo_url,
        franchise_id=sponsor.franchise_id,
        franchise_name=franchise.name if franchise is not None else "Unknown",
        team_count=len(loaded_relation(sponsor, "teams") or []),
    )
