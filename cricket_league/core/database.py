from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from cricket_league.core.config import settings


def is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def enable_sqlite_foreign_keys(engine):
    """SQLite ignores FOREIGN KEY clauses unless the pragma is set per connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def build_engine(url: str, echo: bool = False):
    if is_sqlite(url):
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )
        return enable_sqlite_foreign_keys(engine)

    # Create the engine with `pool_pre_ping=True` to prevent stale connections
    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=1800,    # recycle every 30 min to avoid stale connections
        pool_size=10,
        max_overflow=10,
        pool_timeout=30,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def import_models():
    # Every model has to be imported before create_all sees its table
    from cricket_league.franchises.models.franchise_model import Franchise
    from cricket_league.teams.models.team_model import Team
    from cricket_league.teams.models.team_sponsor_model import TeamSponsor
    from cricket_league.players.models.player_model import Player
    from cricket_league.sponsors.models.sponsor_model import Sponsor


# Function to initialize the database
def init_db(bind=None):
    import_models()

    # Use context manager to ensure connection is released
    with (bind or engine).begin() as conn:
        Base.metadata.create_all(bind=conn)
