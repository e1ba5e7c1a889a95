from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from cricket_league.core.database import Base


class Franchise(Base):
    __tablename__ = "franchises"

    franchise_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    home_city = Column(String(100))
    logo_url = Column(String(255))
    version = Column(Integer, nullable=False, default=1)

    # Both foreign keys are RESTRICT, the database refuses the delete
    teams = relationship("Team", back_populates="franchise", passive_deletes="all")
    sponsors = relationship("Sponsor", back_populates="franchise", passive_deletes="all")

    def __repr__(self) -> str:
        return f"<Franchise(id={self.franchise_id}, name='{self.name}')>"
