from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from cricket_league.core.utils import loaded_relation


class TeamIn(BaseModel):
    """Team fields as stored."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    city: Optional[str] = Field(None, max_length=100)
    logo_url: Optional[str] = Field(None, max_length=255)
    franchise_id: int


class TeamPayload(BaseModel):
    """Body of the JSON create/update endpoints; `home_ground` is the stored city."""

    model_config = ConfigDict(str_strip_whitespace=True)

    team_id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=100)
    home_ground: Optional[str] = Field(None, max_length=100)
    logo_url: Optional[str] = Field(None, max_length=255)
    franchise_id: int

    def to_team_in(self) -> TeamIn:
        return TeamIn(
            name=self.name,
            city=self.home_ground,
            logo_url=self.logo_url,
            franchise_id=self.franchise_id,
        )


class TeamDto(BaseModel):
    team_id: int
    name: str
    home_ground: Optional[str] = None
    logo_url: Optional[str] = None
    franchise_id: int
    franchise_name: str = "Unknown"
    player_count: int = 0
    sponsor_count: int = 0


class TeamSponsorDto(BaseModel):
    team_id: int
    sponsor_id: int
    sponsor_name: str = "Unknown"


def to_team_dto(team) -> TeamDto:
    franchise = loaded_relation(team, "franchise")
    return TeamDto(
        team_id=team.team_id,
        name=team.name,
        home_ground=team.city,
        logo_url=team.logo_url,
        franchise_id=team.franchise_id,
        franchise_name=franchise.name if franchise is not None else "Unknown",
        player_count=len(loaded_relation(team, "players") or []),
        sponsor_count=len(loaded_relation(team, "sponsors") or []),
    )


def to_team_sponsor_dtos(team) -> List[TeamSponsorDto]:
    return [
        TeamSponsorDto(team_id=team.team_id, sponsor_id=sponsor.sponsor_id, sponsor_name=sponsor.name)
        for sponsor in loaded_relation(team, "sponsors") or []
    ]
