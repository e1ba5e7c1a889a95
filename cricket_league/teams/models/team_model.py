from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from cricket_league.core.database import Base


class Team(Base):
    __tablename__ = "teams"

    team_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    city = Column(String(100))
    logo_url = Column(String(255))
    franchise_id = Column(
        Integer, ForeignKey("franchises.franchise_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    version = Column(Integer, nullable=False, default=1)

    franchise = relationship("Franchise", back_populates="teams")
    players = relationship("Player", back_populates="team", passive_deletes="all")

    # Link rows go with the team (ON DELETE CASCADE)
    team_sponsors = relationship(
        "TeamSponsor", back_populates="team", cascade="all, delete-orphan", passive_deletes=True
    )
    sponsors = relationship(
        "Sponsor", secondary="team_sponsors", viewonly=True
    )

    def __repr__(self) -> str:
        return f"<Team(id={self.team_id}, name='{self.name}')>"
