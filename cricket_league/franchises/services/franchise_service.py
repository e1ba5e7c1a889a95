import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from cricket_league.core.exceptions import (
    BadRequestError,
    ConcurrencyConflictError,
    NotFoundError,
    RestrictedDeleteError,
)
from cricket_league.core.repository import Repository
from cricket_league.franchises.models import Franchise
from cricket_league.franchises.schemas.franchise_schema import (
    FranchiseDto,
    FranchiseIn,
    to_franchise_dto,
)

logger = logging.getLogger(__name__)

# Needed for team_count / sponsor_count
FRANCHISE_RELATIONS = ("teams", "sponsors")


class FranchiseService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = Repository(db, Franchise, "franchise_id", "Franchise")

    def list_entities(self) -> List[Franchise]:
        return self.repository.list(include=FRANCHISE_RELATIONS)

    def get_entity(self, franchise_id: int) -> Franchise:
        return self.repository.get_by_id(franchise_id, include=FRANCHISE_RELATIONS)

    def choices(self) -> List[Tuple[int, str]]:
        """(id, name) pairs for select boxes."""
        return [(f.franchise_id, f.name) for f in self.repository.list()]

    def list_all(self) -> List[FranchiseDto]:
        return [to_franchise_dto(f) for f in self.list_entities()]

    def get_one(self, franchise_id: int) -> FranchiseDto:
        return to_franchise_dto(self.get_entity(franchise_id))

    def create(self, data: FranchiseIn) -> FranchiseDto:
        franchise = self.repository.insert(data.model_dump(include=set(FranchiseIn.model_fields)))
        logger.info(f"Created franchise {franchise.franchise_id} '{franchise.name}'")
        return self.get_one(franchise.franchise_id)

    def update(self, franchise_id: int, body_id, data: FranchiseIn) -> FranchiseDto:
        if franchise_id != body_id:
            raise BadRequestError(
                f"Path ID {franchise_id} does not match franchise_id {body_id} in the body."
            )

        franchise = self.repository.get_by_id(franchise_id)
        values = data.model_dump(include=set(FranchiseIn.model_fields))
        try:
            self.repository.update(franchise_id, values, expected_version=franchise.version)
        except ConcurrencyConflictError:
            if not self.repository.exists(franchise_id):
                raise NotFoundError.for_entity("Franchise", franchise_id)
            logger.warning(f"Concurrent update on franchise {franchise_id}")
            raise

        logger.info(f"Updated franchise {franchise_id}")
        return self.get_one(franchise_id)

    def delete(self, franchise_id: int):
        try:
            self.repository.delete(franchise_id)
        except RestrictedDeleteError:
            franchise = self.get_entity(franchise_id)
            logger.warning(f"Refused to delete franchise {franchise_id}: it still has children")
            raise RestrictedDeleteError(
                f"Franchise '{franchise.name}' still has {len(franchise.teams)} team(s) and "
                f"{len(franchise.sponsors)} sponsor(s); remove them first."
            )
        logger.info(f"Deleted franchise {franchise_id}")
