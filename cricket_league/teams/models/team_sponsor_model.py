from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from cricket_league.core.database import Base


class TeamSponsor(Base):
    __tablename__ = "team_sponsors"

    team_id = Column(Integer, ForeignKey("teams.team_id", ondelete="CASCADE"), primary_key=True)
    sponsor_id = Column(Integer, ForeignKey("sponsors.sponsor_id", ondelete="CASCADE"), primary_key=True)

    team = relationship("Team", back_populates="team_sponsors")
    sponsor = relationship("Sponsor", back_populates="team_sponsors")
