from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from cricket_league.core.database import Base


class Sponsor(Base):
    __tablename__ = "sponsors"

    sponsor_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    logo_url = Column(String(255))
    franchise_id = Column(
        Integer, ForeignKey("franchises.franchise_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    version = Column(Integer, nullable=False, default=1)

    franchise = relationship("Franchise", back_populates="sponsors")
    team_sponsors = relationship(
        "TeamSponsor", back_populates="sponsor", cascade="all, delete-orphan", passive_deletes=True
    )
    teams = relationship(
        "Team", secondary="team_sponsors", viewonly=True
    )

    def __repr__(self) -> str:
        return f"<Sponsor(id={self.sponsor_id}, name='{self.name}')>"
