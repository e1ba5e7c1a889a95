from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cricket_league.core.database import get_db
from cricket_league.sponsors.schemas.sponsor_schema import SponsorDto, SponsorIn, SponsorUpdate
from cricket_league.sponsors.services.sponsor_service import SponsorService

router = APIRouter()


@router.get("/ListSponsors", response_model=List[SponsorDto])
def list_sponsors(db: Session = Depends(get_db)):
    return SponsorService(db).list_all()


@router.get("/FindSponsor/{sponsor_id}", response_model=SponsorDto)
def find_sponsor(sponsor_id: int, db: Session = Depends(get_db)):
    return SponsorService(db).get_one(sponsor_id)


@router.post("/CreateSponsor", response_model=SponsorDto)
def create_sponsor(payload: SponsorIn, db: Session = Depends(get_db)):
    return SponsorService(db).create(payload)


@router.put("/UpdateSponsor/{sponsor_id}")
def update_sponsor(sponsor_id: int, payload: SponsorUpdate, db: Session = Depends(get_db)):
    SponsorService(db).update(sponsor_id, payload.sponsor_id, payload)
    return {"message": "Sponsor updated successfully"}


@router.delete("/DeleteSponsor/{sponsor_id}")
def delete_sponsor(sponsor_id: int, db: Session = Depends(get_db)):
    SponsorService(db).delete(sponsor_id)
    return {"message": "Sponsor deleted successfully"}
