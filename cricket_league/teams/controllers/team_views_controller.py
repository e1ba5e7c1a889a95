from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from cricket_league.core.database import get_db
from cricket_league.core.exceptions import ConflictError, RestrictedDeleteError, ValidationError
from cricket_league.core.templating import form_errors, form_field, render, render_form
from cricket_league.core.utils import clean_form
from cricket_league.sponsors.services.sponsor_service import SponsorService
from cricket_league.teams.schemas.team_schema import TeamIn
from cricket_league.teams.services.team_service import TeamService

router = APIRouter(default_response_class=HTMLResponse)


def team_form(request: Request, db: Session, title: str, action: str, values: dict, errors=None, hidden=None):
    franchises = TeamService(db).franchise_service.choices()
    fields = [
        form_field("name", "Name", values.get("name"), required=True),
        form_field("city", "City", values.get("city")),
        form_field("logo_url", "Logo URL", values.get("logo_url"), type="url"),
        form_field("franchise_id", "Franchise", values.get("franchise_id"), options=franchises, required=True),
    ]
    return render_form(request, title, action, "/Teams/", fields, errors, hidden)


def team_details(request: Request, db: Session, team_id: int, error: str = None, status_code: int = 200):
    team = TeamService(db).get_entity(team_id)
    linked = {sponsor.sponsor_id for sponsor in team.sponsors}
    available = [(sid, name) for sid, name in SponsorService(db).choices() if sid not in linked]
    return render(
        request,
        "teams/details.html",
        {"team": team, "available_sponsors": available, "error": error},
        status_code=status_code,
    )


@router.get("/")
def index(request: Request, db: Session = Depends(get_db)):
    teams = TeamService(db).list_entities()
    return render(request, "teams/index.html", {"teams": teams})


@router.get("/Details/{team_id}")
def details(team_id: int, request: Request, db: Session = Depends(get_db)):
    return team_details(request, db, team_id)


@router.get("/Create")
def create_form(request: Request, db: Session = Depends(get_db)):
    return team_form(request, db, "Create team", "/Teams/Create", {})


@router.post("/Create")
def create(
    request: Request,
    name: str = Form(""),
    city: str = Form(""),
    logo_url: str = Form(""),
    franchise_id: str = Form(""),
    db: Session = Depends(get_db),
):
    values = clean_form(
        {"name": name, "city": city, "logo_url": logo_url, "franchise_id": franchise_id},
        required=("name", "franchise_id"),
    )
    try:
        TeamService(db).create(TeamIn(**values))
    except (PydanticValidationError, ValidationError) as e:
        return team_form(request, db, "Create team", "/Teams/Create", values, form_errors(e))
    return RedirectResponse("/Teams/", status_code=303)


@router.get("/Edit/{team_id}")
def edit_form(team_id: int, request: Request, db: Session = Depends(get_db)):
    team = TeamService(db).get_entity(team_id)
    values = {"name": team.name, "city": team.city, "logo_url": team.logo_url, "franchise_id": team.franchise_id}
    return team_form(request, db, f"Edit {team.name}", f"/Teams/Edit/{team_id}", values, hidden={"team_id": team_id})


@router.post("/Edit/{team_id}")
def edit(
    team_id: int,
    request: Request,
    body_id: int = Form(..., alias="team_id"),
    name: str = Form(""),
    city: str = Form(""),
    logo_url: str = Form(""),
    franchise_id: str = Form(""),
    db: Session = Depends(get_db),
):
    values = clean_form(
        {"name": name, "city": city, "logo_url": logo_url, "franchise_id": franchise_id},
        required=("name", "franchise_id"),
    )
    try:
        TeamService(db).update(team_id, body_id, TeamIn(**values))
    except (PydanticValidationError, ValidationError) as e:
        return team_form(
            request, db, "Edit team", f"/Teams/Edit/{team_id}", values, form_errors(e), hidden={"team_id": body_id}
        )
    return RedirectResponse("/Teams/", status_code=303)


@router.get("/Delete/{team_id}")
def delete_form(team_id: int, request: Request, db: Session = Depends(get_db)):
    team = TeamService(db).get_entity(team_id)
    return render(request, "delete.html", {
        "title": f"Delete team {team.name}?",
        "action": f"/Teams/Delete/{team_id}",
        "cancel_url": "/Teams/",
        "details": {
            "Name": team.name,
            "Franchise": team.franchise.name if team.franchise else "Unknown",
            "Players": len(team.players),
            "Sponsors": len(team.sponsors),
        },
    })


@router.post("/Delete/{team_id}")
def delete(team_id: int, request: Request, db: Session = Depends(get_db)):
    try:
        TeamService(db).delete(team_id)
    except RestrictedDeleteError as e:
        return team_details(request, db, team_id, error=e.message, status_code=e.status_code)
    return RedirectResponse("/Teams/", status_code=303)


@router.post("/Details/{team_id}/Sponsors")
def add_sponsor(team_id: int, request: Request, sponsor_id: str = Form(""), db: Session = Depends(get_db)):
    if not sponsor_id.strip().isdigit():
        return team_details(request, db, team_id, error="Choose a sponsor to link.", status_code=400)
    try:
        TeamService(db).add_sponsor(team_id, int(sponsor_id))
    except (ValidationError, ConflictError) as e:
        return team_details(request, db, team_id, error=e.message, status_code=e.status_code)
    return RedirectResponse(f"/Teams/Details/{team_id}", status_code=303)


@router.post("/Details/{team_id}/Sponsors/{sponsor_id}/Remove")
def remove_sponsor(team_id: int, sponsor_id: int, db: Session = Depends(get_db)):
    TeamService(db).remove_sponsor(team_id, sponsor_id)
    return RedirectResponse(f"/Teams/Details/{team_id}", status_code=303)
