import pytest
from sqlalchemy import text

from cricket_league.core.exceptions import ConcurrencyConflictError, NotFoundError, RestrictedDeleteError
from cricket_league.core.repository import MAX_ID, Repository
from cricket_league.franchises.models import Franchise
from cricket_league.franchises.schemas.franchise_schema import FranchiseIn
from cricket_league.franchises.services.franchise_service import FranchiseService
from cricket_league.teams.models import Team


@pytest.fixture()
def franchises(db):
    return Repository(db, Franchise, "franchise_id", "Franchise")


def test_insert_assigns_id_and_initial_version(franchises):
    franchise = franchises.insert({"name": "Super Kings", "home_city": "Toronto"})

    assert franchise.franchise_id == 1
    assert franchise.version == 1
    assert franchises.exists(1)
    assert not franchises.exists(2)
    assert not franchises.exists(None)


def test_list_only_loads_requested_relations(db, franchises, franchise, team):
    db.expire_all()

    listed = franchises.list(include=("teams",))

    assert "teams" in listed[0].__dict__
    assert "sponsors" not in listed[0].__dict__


def test_unknown_relation_is_rejected(franchises):
    with pytest.raises(ValueError):
        franchises.list(include=("coaches",))


def test_get_by_id_missing_raises_not_found(franchises):
    with pytest.raises(NotFoundError) as exc_info:
        franchises.get_by_id(3)

    assert exc_info.value.message == "Franchise with ID 3 does not exist."


def test_update_bumps_version(franchises):
    franchise = franchises.insert({"name": "Super Kings"})

    updated = franchises.update(franchise.franchise_id, {"name": "Kings"}, expected_version=1)

    assert updated.name == "Kings"
    assert updated.version == 2


def test_update_with_stale_version_conflicts(franchises):
    franchise = franchises.insert({"name": "Super Kings"})
    franchises.update(franchise.franchise_id, {"name": "Kings"}, expected_version=1)

    with pytest.raises(ConcurrencyConflictError):
        franchises.update(franchise.franchise_id, {"name": "Lost write"}, expected_version=1)

    assert franchises.get_by_id(franchise.franchise_id).name == "Kings"


def test_update_of_deleted_row_conflicts(franchises):
    franchise_id = franchises.insert({"name": "Super Kings"}).franchise_id
    franchises.delete(franchise_id)

    with pytest.raises(ConcurrencyConflictError):
        franchises.update(franchise_id, {"name": "Ghost"}, expected_version=1)

    assert not franchises.exists(franchise_id)


@pytest.mark.parametrize("entity_id", [0, MAX_ID + 1, 10 ** 20])
def test_ids_outside_storable_range_match_nothing(franchises, entity_id):
    franchises.insert({"name": "Super Kings"})

    assert franchises.find(entity_id) is None
    assert not franchises.exists(entity_id)
    with pytest.raises(NotFoundError):
        franchises.get_by_id(entity_id)
    with pytest.raises(NotFoundError):
        franchises.delete(entity_id)
    with pytest.raises(ConcurrencyConflictError):
        franchises.update(entity_id, {"name": "Ghost"}, expected_version=1)


def test_delete_restricted_by_children(db, franchises, franchise, team):
    with pytest.raises(RestrictedDeleteError):
        franchises.delete(franchise.franchise_id)

    # Session is usable again after the rollback
    assert Repository(db, Team, "team_id", "Team").exists(team.team_id)


def _interfere_before_update(db, service, statement):
    """Run `statement` in its own committed transaction right before the guarded write."""
    original_update = service.repository.update

    def update(entity_id, values, expected_version):
        db.execute(text(statement), {"id": entity_id})
        db.commit()
        return original_update(entity_id, values, expected_version)

    service.repository.update = update


def test_concurrent_modification_surfaces_as_conflict(db, franchise):
    service = FranchiseService(db)
    _interfere_before_update(db, service, "UPDATE franchises SET version = version + 1 WHERE franchise_id = :id")

    with pytest.raises(ConcurrencyConflictError):
        service.update(franchise.franchise_id, franchise.franchise_id, FranchiseIn(name="Mine"))

    assert service.get_one(franchise.franchise_id).name == "Super Kings"


def test_concurrent_delete_surfaces_as_not_found(db, franchise):
    service = FranchiseService(db)
    _interfere_before_update(db, service, "DELETE FROM franchises WHERE franchise_id = :id")

    with pytest.raises(NotFoundError):
        service.update(franchise.franchise_id, franchise.franchise_id, FranchiseIn(name="Mine"))
