from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from cricket_league.core.database import get_db
from cricket_league.core.exceptions import ValidationError
from cricket_league.core.templating import form_errors, form_field, render, render_form
from cricket_league.core.utils import clean_form
from cricket_league.players.schemas.player_schema import MAX_AGE, MIN_AGE, PlayerIn
from cricket_league.players.services.player_service import PlayerService
from cricket_league.teams.services.team_service import TeamService

router = APIRouter(default_response_class=HTMLResponse)

REQUIRED = ("name", "age", "role", "team_id")


def player_form(request: Request, db: Session, title: str, action: str, values: dict, errors=None, hidden=None):
    fields = [
        form_field("name", "Name", values.get("name"), required=True),
        form_field("age", f"Age ({MIN_AGE}-{MAX_AGE})", values.get("age"), type="number", required=True),
        form_field("role", "Role", values.get("role"), required=True),
        form_field("team_id", "Team", values.get("team_id"), options=TeamService(db).choices(), required=True),
    ]
    return render_form(request, title, action, "/Players/", fields, errors, hidden)


@router.get("/")
def index(request: Request, db: Session = Depends(get_db)):
    players = PlayerService(db).list_entities()
    return render(request, "players/index.html", {"players": players})


@router.get("/Details/{player_id}")
def details(player_id: int, request: Request, db: Session = Depends(get_db)):
    player = PlayerService(db).get_entity(player_id)
    return render(request, "players/details.html", {"player": player})


@router.get("/Create")
def create_form(request: Request, db: Session = Depends(get_db)):
    return player_form(request, db, "Create player", "/Players/Create", {})


@router.post("/Create")
def create(
    request: Request,
    name: str = Form(""),
    age: str = Form(""),
    role: str = Form(""),
    team_id: str = Form(""),
    db: Session = Depends(get_db),
):
    values = clean_form({"name": name, "age": age, "role": role, "team_id": team_id}, required=REQUIRED)
    try:
        PlayerService(db).create(PlayerIn(**values))
    except (PydanticValidationError, ValidationError) as e:
        return player_form(request, db, "Create player", "/Players/Create", values, form_errors(e))
    return RedirectResponse("/Players/", status_code=303)


@router.get("/Edit/{player_id}")
def edit_form(player_id: int, request: Request, db: Session = Depends(get_db)):
    player = PlayerService(db).get_entity(player_id)
    values = {"name": player.name, "age": player.age, "role": player.role, "team_id": player.team_id}
    return player_form(
        request, db, f"Edit {player.name}", f"/Players/Edit/{player_id}", values, hidden={"player_id": player_id}
    )


@router.post("/Edit/{player_id}")
def edit(
    player_id: int,
    request: Request,
    body_id: int = Form(..., alias="player_id"),
    name: str = Form(""),
    age: str = Form(""),
    role: str = Form(""),
    team_id: str = Form(""),
    db: Session = Depends(get_db),
):
    values = clean_form({"name": name, "age": age, "role": role, "team_id": team_id}, required=REQUIRED)
    try:
        PlayerService(db).update(player_id, body_id, PlayerIn(**values))
    except (PydanticValidationError, ValidationError) as e:
        return player_form(
            request, db, "Edit player", f"/Players/Edit/{player_id}", values, form_errors(e),
            hidden={"player_id": body_id},
        )
    return RedirectResponse("/Players/", status_code=303)


@router.get("/Delete/{player_id}")
def delete_form(player_id: int, request: Request, db: Session = Depends(get_db)):
    player = PlayerService(db).get_entity(player_id)
    return render(request, "delete.html", {
        "title": f"Delete player {player.name}?",
        "action": f"/Players/Delete/{player_id}",
        "cancel_url": "/Players/",
        "details": {
            "Name": player.name,
            "Age": player.age,
            "Role": player.role,
            "Team": player.team.name if player.team else "Unknown",
        },
    })


@router.post("/Delete/{player_id}")
def delete(player_id: int, db: Session = Depends(get_db)):
    PlayerService(db).delete(player_id)
    return RedirectResponse("/Players/", status_code=303)
