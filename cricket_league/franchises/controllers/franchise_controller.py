from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cricket_league.core.database import get_db
from cricket_league.franchises.schemas.franchise_schema import FranchiseDto, FranchiseIn, FranchiseUpdate
from cricket_league.franchises.services.franchise_service import FranchiseService

router = APIRouter()


@router.get("/ListFranchises", response_model=List[FranchiseDto])
def list_franchises(db: Session = Depends(get_db)):
    """All franchises with their team and sponsor counts."""
    return FranchiseService(db).list_all()


@router.get("/FindFranchise/{franchise_id}", response_model=FranchiseDto)
def find_franchise(franchise_id: int, db: Session = Depends(get_db)):
    return FranchiseService(db).get_one(franchise_id)


@router.post("/CreateFranchise", response_model=FranchiseDto)
def create_franchise(payload: FranchiseIn, db: Session = Depends(get_db)):
    return FranchiseService(db).create(payload)


@router.put("/UpdateFranchise/{franchise_id}")
def update_franchise(franchise_id: int, payload: FranchiseUpdate, db: Session = Depends(get_db)):
    """The body must repeat the franchise_id from the path."""
    FranchiseService(db).update(franchise_id, payload.franchise_id, payload)
    return {"message": "Franchise updated successfully"}


@router.delete("/DeleteFranchise/{franchise_id}")
def delete_franchise(franchise_id: int, db: Session = Depends(get_db)):
    FranchiseService(db).delete(franchise_id)
    return {"message": "Franchise deleted successfully"}
