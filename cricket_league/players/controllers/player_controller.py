from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cricket_league.core.database import get_db
from cricket_league.players.schemas.player_schema import PlayerDto, PlayerPayload
from cricket_league.players.services.player_service import PlayerService

router = APIRouter()


@router.get("/ListPlayers", response_model=List[PlayerDto])
def list_players(db: Session = Depends(get_db)):
    return PlayerService(db).list_all()


@router.get("/FindPlayer/{player_id}", response_model=PlayerDto)
def find_player(player_id: int, db: Session = Depends(get_db)):
    return PlayerService(db).get_one(player_id)


@router.post("/CreatePlayer", response_model=PlayerDto)
def create_player(payload: PlayerPayload, db: Session = Depends(get_db)):
    """Names are joined and the age is taken from the birth year."""
    return PlayerService(db).create(payload.to_player_in())


@router.put("/UpdatePlayer/{player_id}")
def update_player(player_id: int, payload: PlayerPayload, db: Session = Depends(get_db)):
    PlayerService(db).update(player_id, payload.player_id, payload.to_player_in())
    return {"message": "Player updated successfully"}


@router.delete("/DeletePlayer/{player_id}")
def delete_player(player_id: int, db: Session = Depends(get_db)):
    PlayerService(db).delete(player_id)
    return {"message": "Player deleted successfully"}
