import pytest

from cricket_league.core.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    RestrictedDeleteError,
    ValidationError,
)
from cricket_league.players.schemas.player_schema import PlayerIn
from cricket_league.players.services.player_service import PlayerService
from cricket_league.sponsors.schemas.sponsor_schema import SponsorIn
from cricket_league.sponsors.services.sponsor_service import SponsorService
from cricket_league.teams.models import TeamSponsor
from cricket_league.teams.schemas.team_schema import TeamIn, TeamPayload
from cricket_league.teams.services.team_service import TeamService


@pytest.fixture()
def sponsor(db, franchise):
    return SponsorService(db).create(SponsorIn(name="Maple Bank", franchise_id=franchise.franchise_id))


def test_get_one_projects_franchise_name(db, team):
    dto = TeamService(db).get_one(team.team_id)

    assert dto.team_id == 1
    assert dto.name == "Super Kings A"
    assert dto.home_ground == "Brampton"
    assert dto.franchise_id == 1
    assert dto.franchise_name == "Super Kings"
    assert dto.player_count == 0
    assert dto.sponsor_count == 0


def test_create_with_missing_franchise_fails_validation(db):
    service = TeamService(db)

    with pytest.raises(ValidationError) as exc_info:
        service.create(TeamIn(name="Orphans", franchise_id=99))

    assert exc_info.value.field == "franchise_id"
    assert service.list_all() == []


def test_payload_maps_home_ground_to_city():
    payload = TeamPayload(team_id=3, name="Kings", home_ground="Maple Leaf Park", franchise_id=1)

    team_in = payload.to_team_in()

    assert team_in.city == "Maple Leaf Park"
    assert team_in.franchise_id == 1


def test_update_moves_team_to_other_franchise(db, franchise, team):
    from cricket_league.franchises.schemas.franchise_schema import FranchiseIn
    from cricket_league.franchises.services.franchise_service import FranchiseService

    other = FranchiseService(db).create(FranchiseIn(name="Royals"))
    service = TeamService(db)

    updated = service.update(team.team_id, team.team_id, TeamIn(name="Royals A", franchise_id=other.franchise_id))

    assert updated.franchise_name == "Royals"
    assert FranchiseService(db).get_one(franchise.franchise_id).team_count == 0
    assert FranchiseService(db).get_one(other.franchise_id).team_count == 1


def test_update_to_missing_franchise_fails_validation(db, team):
    with pytest.raises(ValidationError):
        TeamService(db).update(team.team_id, team.team_id, TeamIn(name="Kings", franchise_id=404))

    assert TeamService(db).get_one(team.team_id).franchise_id == 1


def test_update_with_mismatched_ids_is_bad_request(db, team):
    with pytest.raises(BadRequestError):
        TeamService(db).update(team.team_id, None, TeamIn(name="Kings", franchise_id=1))


def test_delete_team_with_players_is_restricted(db, team):
    PlayerService(db).create(PlayerIn(name="John Doe", age=25, role="Bowler", team_id=team.team_id))

    with pytest.raises(RestrictedDeleteError) as exc_info:
        TeamService(db).delete(team.team_id)

    assert "1 player(s)" in exc_info.value.message


def test_delete_team_cascades_sponsor_links(db, team, sponsor):
    service = TeamService(db)
    service.add_sponsor(team.team_id, sponsor.sponsor_id)

    service.delete(team.team_id)

    assert db.query(TeamSponsor).count() == 0
    assert SponsorService(db).get_one(sponsor.sponsor_id).team_count == 0
    with pytest.raises(NotFoundError):
        service.delete(team.team_id)


def test_add_and_remove_sponsor(db, team, sponsor):
    service = TeamService(db)

    links = service.add_sponsor(team.team_id, sponsor.sponsor_id)

    assert [(link.sponsor_id, link.sponsor_name) for link in links] == [(sponsor.sponsor_id, "Maple Bank")]
    assert service.get_one(team.team_id).sponsor_count == 1
    assert SponsorService(db).get_one(sponsor.sponsor_id).team_count == 1

    assert service.remove_sponsor(team.team_id, sponsor.sponsor_id) == []
    assert service.get_one(team.team_id).sponsor_count == 0


def test_linking_same_sponsor_twice_conflicts(db, team, sponsor):
    service = TeamService(db)
    service.add_sponsor(team.team_id, sponsor.sponsor_id)

    with pytest.raises(ConflictError):
        service.add_sponsor(team.team_id, sponsor.sponsor_id)


def test_linking_missing_sponsor_fails_validation(db, team):
    with pytest.raises(ValidationError) as exc_info:
        TeamService(db).add_sponsor(team.team_id, 77)

    assert exc_info.value.field == "sponsor_id"


def test_removing_unknown_link_is_not_found(db, team, sponsor):
    with pytest.raises(NotFoundError):
        TeamService(db).remove_sponsor(team.team_id, sponsor.sponsor_id)


def test_deleting_sponsor_removes_its_links(db, team, sponsor):
    TeamService(db).add_sponsor(team.team_id, sponsor.sponsor_id)

    SponsorService(db).delete(sponsor.sponsor_id)

    assert TeamService(db).list_sponsors(team.team_id) == []
