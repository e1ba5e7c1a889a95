from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from cricket_league.core.exceptions import ValidationError
from cricket_league.core.utils import loaded_relation, years_ago

MIN_AGE = 15
MAX_AGE = 60


class PlayerIn(BaseModel):
    """Player fields as stored: one combined name and an integer age."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE)
    role: str = Field(..., min_length=1, max_length=50)
    team_id: int


class PlayerPayload(BaseModel):
    """Body of the JSON create/update endpoints.

    The API speaks first/last name and date of birth while the table keeps a
    single name and an age, so the conversion below is lossy: names are
    joined with one space and only the birth year survives.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    player_id: Optional[int] = None
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    date_of_birth: date
    position: str = Field(..., min_length=1, max_length=50)
    team_id: int

    def to_player_in(self, today: Optional[date] = None) -> PlayerIn:
        today = today or date.today()
        name = f"{self.first_name} {self.last_name}"
        if len(name) > 100:
            raise ValidationError("name", "First and last name together must not exceed 100 characters.")

        age = today.year - self.date_of_birth.year
        if not MIN_AGE <= age <= MAX_AGE:
            raise ValidationError(
                "date_of_birth", f"Players must be between {MIN_AGE} and {MAX_AGE} years old."
            )
        return PlayerIn(name=name, age=age, role=self.position, team_id=self.team_id)


class PlayerDto(BaseModel):
    player_id: int
    first_name: str
    last_name: str = ""
    date_of_birth: date
    position: str
    team_id: int
    team_name: str = "Unknown"


def to_player_dto(player, today: Optional[date] = None) -> PlayerDto:
    team = loaded_relation(player, "team")
    return PlayerDto(
        player_id=player.player_id,
        first_name=player.name,
        last_name="",
        date_of_birth=years_ago(player.age, today),
        position=player.role,
        team_id=player.team_id,
        team_name=team.name if team is not None else "Unknown",
    )
