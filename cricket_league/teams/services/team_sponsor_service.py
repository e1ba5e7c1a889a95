import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cricket_league.core.exceptions import ConflictError, NotFoundError, ValidationError
from cricket_league.core.repository import Repository, valid_id
from cricket_league.sponsors.models import Sponsor
from cricket_league.teams.models import Team, TeamSponsor

logger = logging.getLogger(__name__)


class TeamSponsorService:
    def __init__(self, db: Session):
        self.db = db
        self.teams = Repository(db, Team, "team_id", "Team")
        self.sponsors = Repository(db, Sponsor, "sponsor_id", "Sponsor")

    def link(self, team_id: int, sponsor_id: int) -> TeamSponsor:
        """Associate a sponsor with a team; each pair may exist once."""

        # Both ends have to exist before the link row is written
        if not self.teams.exists(team_id):
            raise ValidationError("team_id", f"Team with ID {team_id} does not exist.")
        if not self.sponsors.exists(sponsor_id):
            raise ValidationError("sponsor_id", f"Sponsor with ID {sponsor_id} does not exist.")

        if self.get_link(team_id, sponsor_id):
            raise ConflictError(f"Sponsor {sponsor_id} is already linked to team {team_id}.")

        link = TeamSponsor(team_id=team_id, sponsor_id=sponsor_id)
        self.db.add(link)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(f"Sponsor {sponsor_id} is already linked to team {team_id}.") from e

        logger.info(f"Linked sponsor {sponsor_id} to team {team_id}")
        return link

    def unlink(self, team_id: int, sponsor_id: int):
        if not (valid_id(team_id) and valid_id(sponsor_id)):
            raise NotFoundError(f"Sponsor {sponsor_id} is not linked to team {team_id}.")
        deleted = (
            self.db.query(TeamSponsor)
            .filter(TeamSponsor.team_id == team_id, TeamSponsor.sponsor_id == sponsor_id)
            .delete(synchronize_session=False)
        )
        if not deleted:
            self.db.rollback()
            raise NotFoundError(f"Sponsor {sponsor_id} is not linked to team {team_id}.")
        self.db.commit()
        self.db.expire_all()
        logger.info(f"Unlinked sponsor {sponsor_id} from team {team_id}")

    def get_link(self, team_id: int, sponsor_id: int):
        if not (valid_id(team_id) and valid_id(sponsor_id)):
            return None
        return (
            self.db.query(TeamSponsor)
            .filter(TeamSponsor.team_id == team_id, TeamSponsor.sponsor_id == sponsor_id)
            .first()
        )
