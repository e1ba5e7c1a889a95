import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from cricket_league.core.exceptions import (
    BadRequestError,
    ConcurrencyConflictError,
    NotFoundError,
    ValidationError,
)
from cricket_league.core.repository import Repository
from cricket_league.franchises.models import Franchise
from cricket_league.sponsors.models import Sponsor
from cricket_league.sponsors.schemas.sponsor_schema import SponsorDto, SponsorIn, to_sponsor_dto

logger = logging.getLogger(__name__)

SPONSOR_RELATIONS = ("franchise", "teams")


class SponsorService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = Repository(db, Sponsor, "sponsor_id", "Sponsor")
        self.franchises = Repository(db, Franchise, "franchise_id", "Franchise")

    def list_entities(self) -> List[Sponsor]:
        return self.repository.list(include=SPONSOR_RELATIONS)

    def get_entity(self, sponsor_id: int) -> Sponsor:
        return self.repository.get_by_id(sponsor_id, include=SPONSOR_RELATIONS)

    def choices(self) -> List[Tuple[int, str]]:
        return [(s.sponsor_id, s.name) for s in self.repository.list()]

    def list_all(self) -> List[SponsorDto]:
        return [to_sponsor_dto(s) for s in self.list_entities()]

    def get_one(self, sponsor_id: int) -> SponsorDto:
        return to_sponsor_dto(self.get_entity(sponsor_id))

    def _check_franchise(self, franchise_id: int):
        # The foreign key would reject it too, but only after the write
        if not self.franchises.exists(franchise_id):
            raise ValidationError("franchise_id", "Selected franchise does not exist.")

    def create(self, data: SponsorIn) -> SponsorDto:
        self._check_franchise(data.franchise_id)
        sponsor = self.repository.insert(data.model_dump(include=set(SponsorIn.model_fields)))
        logger.info(f"Created sponsor {sponsor.sponsor_id} '{sponsor.name}' for franchise {sponsor.franchise_id}")
        return self.get_one(sponsor.sponsor_id)

    def update(self, sponsor_id: int, body_id, data: SponsorIn) -> SponsorDto:
        if sponsor_id != body_id:
            raise BadRequestError(f"Path ID {sponsor_id} does not match sponsor_id {body_id} in the body.")

        sponsor = self.repository.get_by_id(sponsor_id)
        self._check_franchise(data.franchise_id)
        values = data.model_dump(include=set(SponsorIn.model_fields))
        try:
            self.repository.update(sponsor_id, values, expected_version=sponsor.version)
        except ConcurrencyConflictError:
            if not self.repository.exists(sponsor_id):
                raise NotFoundError.for_entity("Sponsor", sponsor_id)
            logger.warning(f"Concurrent update on sponsor {sponsor_id}")
            raise

        logger.info(f"Updated sponsor {sponsor_id}")
        return self.get_one(sponsor_id)

    def delete(self, sponsor_id: int):
        self.repository.delete(sponsor_id)
        logger.info(f"Deleted sponsor {sponsor_id}")
