from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cricket_league.core.database import get_db
from cricket_league.teams.schemas.team_schema import TeamDto, TeamPayload, TeamSponsorDto
from cricket_league.teams.services.team_service import TeamService

router = APIRouter()


@router.get("/ListTeams", response_model=List[TeamDto])
def list_teams(db: Session = Depends(get_db)):
    """All teams with their franchise name and player/sponsor counts."""
    return TeamService(db).list_all()


@router.get("/FindTeam/{team_id}", response_model=TeamDto)
def find_team(team_id: int, db: Session = Depends(get_db)):
    return TeamService(db).get_one(team_id)


@router.post("/CreateTeam", response_model=TeamDto)
def create_team(payload: TeamPayload, db: Session = Depends(get_db)):
    return TeamService(db).create(payload.to_team_in())


@router.put("/UpdateTeam/{team_id}")
def update_team(team_id: int, payload: TeamPayload, db: Session = Depends(get_db)):
    TeamService(db).update(team_id, payload.team_id, payload.to_team_in())
    return {"message": "Team updated successfully"}


@router.delete("/DeleteTeam/{team_id}")
def delete_team(team_id: int, db: Session = Depends(get_db)):
    TeamService(db).delete(team_id)
    return {"message": "Team deleted successfully"}


@router.get("/{team_id}/Sponsors", response_model=List[TeamSponsorDto])
def list_team_sponsors(team_id: int, db: Session = Depends(get_db)):
    return TeamService(db).list_sponsors(team_id)


@router.post("/{team_id}/Sponsors/{sponsor_id}", response_model=List[TeamSponsorDto])
def add_team_sponsor(team_id: int, sponsor_id: int, db: Session = Depends(get_db)):
    return TeamService(db).add_sponsor(team_id, sponsor_id)


@router.delete("/{team_id}/Sponsors/{sponsor_id}", response_model=List[TeamSponsorDto])
def remove_team_sponsor(team_id: int, sponsor_id: int, db: Session = Depends(get_db)):
    return TeamService(db).remove_sponsor(team_id, sponsor_id)
