import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from cricket_league.core.exceptions import (
    BadRequestError,
    ConcurrencyConflictError,
    NotFoundError,
    RestrictedDeleteError,
    ValidationError,
)
from cricket_league.core.repository import Repository
from cricket_league.franchises.services.franchise_service import FranchiseService
from cricket_league.teams.models import Team
from cricket_league.teams.schemas.team_schema import (
    TeamDto,
    TeamIn,
    TeamSponsorDto,
    to_team_dto,
    to_team_sponsor_dtos,
)
from cricket_league.teams.services.team_sponsor_service import TeamSponsorService

logger = logging.getLogger(__name__)

TEAM_RELATIONS = ("franchise", "players", "sponsors")


class TeamService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = Repository(db, Team, "team_id", "Team")
        self.franchise_service = FranchiseService(db)
        self.sponsor_links = TeamSponsorService(db)

    def list_entities(self) -> List[Team]:
        return self.repository.list(include=TEAM_RELATIONS)

    def get_entity(self, team_id: int) -> Team:
        return self.repository.get_by_id(team_id, include=TEAM_RELATIONS)

    def choices(self) -> List[Tuple[int, str]]:
        return [(t.team_id, t.name) for t in self.repository.list()]

    def list_all(self) -> List[TeamDto]:
        return [to_team_dto(t) for t in self.list_entities()]

    def get_one(self, team_id: int) -> TeamDto:
        return to_team_dto(self.get_entity(team_id))

    def _check_franchise(self, franchise_id: int):
        if not self.franchise_service.repository.exists(franchise_id):
            raise ValidationError("franchise_id", "Selected franchise does not exist.")

    def create(self, data: TeamIn) -> TeamDto:
        self._check_franchise(data.franchise_id)
        team = self.repository.insert(data.model_dump())
        logger.info(f"Created team {team.team_id} '{team.name}' for franchise {team.franchise_id}")
        return self.get_one(team.team_id)

    def update(self, team_id: int, body_id, data: TeamIn) -> TeamDto:
        if team_id != body_id:
            raise BadRequestError(f"Path ID {team_id} does not match team_id {body_id} in the body.")

        team = self.repository.get_by_id(team_id)
        self._check_franchise(data.franchise_id)
        try:
            self.repository.update(team_id, data.model_dump(), expected_version=team.version)
        except ConcurrencyConflictError:
            if not self.repository.exists(team_id):
                raise NotFoundError.for_entity("Team", team_id)
            logger.warning(f"Concurrent update on team {team_id}")
            raise

        logger.info(f"Updated team {team_id}")
        return self.get_one(team_id)

    def delete(self, team_id: int):
        # Sponsor links cascade, players do not
        try:
            self.repository.delete(team_id)
        except RestrictedDeleteError:
            team = self.get_entity(team_id)
            logger.warning(f"Refused to delete team {team_id}: it still has players")
            raise RestrictedDeleteError(
                f"Team '{team.name}' still has {len(team.players)} player(s); remove them first."
            )
        logger.info(f"Deleted team {team_id}")

    def add_sponsor(self, team_id: int, sponsor_id: int) -> List[TeamSponsorDto]:
        self.sponsor_links.link(team_id, sponsor_id)
        return self.list_sponsors(team_id)

    def remove_sponsor(self, team_id: int, sponsor_id: int) -> List[TeamSponsorDto]:
        self.sponsor_links.unlink(team_id, sponsor_id)
        return self.list_sponsors(team_id)

    def list_sponsors(self, team_id: int) -> List[TeamSponsorDto]:
        return to_team_sponsor_dtos(self.repository.get_by_id(team_id, include=("sponsors",)))
