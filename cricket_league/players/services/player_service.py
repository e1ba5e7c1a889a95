import logging
from typing import List

from sqlalchemy.orm import Session

from cricket_league.core.exceptions import (
    BadRequestError,
    ConcurrencyConflictError,
    NotFoundError,
    ValidationError,
)
from cricket_league.core.repository import Repository
from cricket_league.players.models import Player
from cricket_league.players.schemas.player_schema import PlayerDto, PlayerIn, to_player_dto
from cricket_league.teams.models import Team

logger = logging.getLogger(__name__)


class PlayerService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = Repository(db, Player, "player_id", "Player")
        self.teams = Repository(db, Team, "team_id", "Team")

    def list_entities(self) -> List[Player]:
        return self.repository.list(include=("team",))

    def get_entity(self, player_id: int) -> Player:
        return self.repository.get_by_id(player_id, include=("team",))

    def list_all(self) -> List[PlayerDto]:
        return [to_player_dto(p) for p in self.list_entities()]

    def get_one(self, player_id: int) -> PlayerDto:
        return to_player_dto(self.get_entity(player_id))

    def _check_team(self, team_id: int):
        if not self.teams.exists(team_id):
            raise ValidationError("team_id", "Selected team does not exist.")

    def create(self, data: PlayerIn) -> PlayerDto:
        self._check_team(data.team_id)
        player = self.repository.insert(data.model_dump())
        logger.info(f"Created player {player.player_id} '{player.name}' in team {player.team_id}")
        return self.get_one(player.player_id)

    def update(self, player_id: int, body_id, data: PlayerIn) -> PlayerDto:
        if player_id != body_id:
            raise BadRequestError(f"Path ID {player_id} does not match player_id {body_id} in the body.")

        player = self.repository.get_by_id(player_id)
        self._check_team(data.team_id)
        try:
            self.repository.update(player_id, data.model_dump(), expected_version=player.version)
        except ConcurrencyConflictError:
            if not self.repository.exists(player_id):
                raise NotFoundError.for_entity("Player", player_id)
            logger.warning(f"Concurrent update on player {player_id}")
            raise

        logger.info(f"Updated player {player_id}")
        return self.get_one(player_id)

    def delete(self, player_id: int):
        self.repository.delete(player_id)
        logger.info(f"Deleted player {player_id}")
