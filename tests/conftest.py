import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cricket_league.core.database import Base, enable_sqlite_foreign_keys, get_db, init_db
from cricket_league.franchises.schemas.franchise_schema import FranchiseIn
from cricket_league.franchises.services.franchise_service import FranchiseService
from cricket_league.main import app
from cricket_league.teams.schemas.team_schema import TeamIn
from cricket_league.teams.services.team_service import TeamService


@pytest.fixture()
def engine():
    # One shared in-memory connection, foreign keys enforced like production
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture()
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    # No context manager: the startup hook would create the real database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def franchise(db):
    return FranchiseService(db).create(FranchiseIn(name="Super Kings", home_city="Toronto"))


@pytest.fixture()
def team(db, franchise):
    return TeamService(db).create(TeamIn(name="Super Kings A", city="Brampton", franchise_id=franchise.franchise_id))
