from sqlalchemy import CheckConstraint, Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from cricket_league.core.database import Base


class Player(Base):
    __tablename__ = "players"

    player_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    age = Column(Integer, nullable=False)
    role = Column(String(50), nullable=False)  # e.g. Batsman, Bowler, All rounder
    team_id = Column(Integer, ForeignKey("teams.team_id", ondelete="RESTRICT"), nullable=False, index=True)
    version = Column(Integer, nullable=False, default=1)

    team = relationship("Team", back_populates="players")

    __table_args__ = (
        CheckConstraint("age BETWEEN 15 AND 60", name="ck_players_age"),
    )

    def __repr__(self) -> str:
        return f"<Player(id={self.player_id}, name='{self.name}')>"
