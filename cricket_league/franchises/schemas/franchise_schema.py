from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from cricket_league.core.utils import loaded_relation


class FranchiseIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    home_city: Optional[str] = Field(None, max_length=100)
    logo_url: Optional[str] = Field(None, max_length=255)


class FranchiseUpdate(FranchiseIn):
    franchise_id: int


class FranchiseDto(BaseModel):
    franchise_id: int
    name: str
    home_city: Optional[str] = None
    logo_url: Optional[str] = None
    team_count: int = 0
    sponsor_count: int = 0


def to_franchise_dto(franchise) -> FranchiseDto:
    """Flatten a franchise; the counts need `teams` and `sponsors` loaded."""
    return FranchiseDto(
        franchise_id=franchise.franchise_id,
        name=franchise.name,
        home_city=franchise.home_city,
        logo_url=franchise.logo_url,
        team_count=len(loaded_relation(franchise, "teams") or []),
        sponsor_count=len(loaded_relation(franchise, "sponsors") or []),
    )
