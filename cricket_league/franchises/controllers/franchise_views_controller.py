from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from cricket_league.core.database import get_db
from cricket_league.core.exceptions import RestrictedDeleteError, ValidationError
from cricket_league.core.templating import form_errors, form_field, render, render_form
from cricket_league.core.utils import clean_form
from cricket_league.franchises.schemas.franchise_schema import FranchiseIn
from cricket_league.franchises.services.franchise_service import FranchiseService

router = APIRouter(default_response_class=HTMLResponse)


def franchise_related(franchise):
    """Teams and sponsors shown under the edit form."""
    return [
        {
            "heading": "Teams",
            "items": [(f"/Teams/Details/{t.team_id}", t.name) for t in franchise.teams],
            "add_url": "/Teams/Create",
            "add_label": "Add team",
        },
        {
            "heading": "Sponsors",
            "items": [(f"/Sponsors/Details/{s.sponsor_id}", s.name) for s in franchise.sponsors],
            "add_url": "/Sponsors/Create",
            "add_label": "Add sponsor",
        },
    ]


def franchise_form(request: Request, title: str, action: str, values: dict, errors=None, hidden=None, related=None):
    fields = [
        form_field("name", "Name", values.get("name"), required=True),
        form_field("home_city", "Home city", values.get("home_city")),
        form_field("logo_url", "Logo URL", values.get("logo_url"), type="url"),
    ]
    return render_form(request, title, action, "/Franchises/", fields, errors, hidden, related)


@router.get("/")
def index(request: Request, db: Session = Depends(get_db)):
    franchises = FranchiseService(db).list_entities()
    return render(request, "franchises/index.html", {"franchises": franchises})


@router.get("/Details/{franchise_id}")
def details(franchise_id: int, request: Request, db: Session = Depends(get_db)):
    franchise = FranchiseService(db).get_entity(franchise_id)
    return render(request, "franchises/details.html", {"franchise": franchise})


@router.get("/Create")
def create_form(request: Request):
    return franchise_form(request, "Create franchise", "/Franchises/Create", {})


@router.post("/Create")
def create(
    request: Request,
    name: str = Form(""),
    home_city: str = Form(""),
    logo_url: str = Form(""),
    db: Session = Depends(get_db),
):
    values = clean_form({"name": name, "home_city": home_city, "logo_url": logo_url}, required=("name",))
    try:
        FranchiseService(db).create(FranchiseIn(**values))
    except (PydanticValidationError, ValidationError) as e:
        return franchise_form(request, "Create franchise", "/Franchises/Create", values, form_errors(e))
    return RedirectResponse("/Franchises/", status_code=303)


@router.get("/Edit/{franchise_id}")
def edit_form(franchise_id: int, request: Request, db: Session = Depends(get_db)):
    franchise = FranchiseService(db).get_entity(franchise_id)
    values = {"name": franchise.name, "home_city": franchise.home_city, "logo_url": franchise.logo_url}
    return franchise_form(
        request, f"Edit {franchise.name}", f"/Franchises/Edit/{franchise_id}", values,
        hidden={"franchise_id": franchise_id}, related=franchise_related(franchise),
    )


@router.post("/Edit/{franchise_id}")
def edit(
    franchise_id: int,
    request: Request,
    body_id: int = Form(..., alias="franchise_id"),
    name: str = Form(""),
    home_city: str = Form(""),
    logo_url: str = Form(""),
    db: Session = Depends(get_db),
):
    values = clean_form({"name": name, "home_city": home_city, "logo_url": logo_url}, required=("name",))
    try:
        FranchiseService(db).update(franchise_id, body_id, FranchiseIn(**values))
    except (PydanticValidationError, ValidationError) as e:
        return franchise_form(
            request, "Edit franchise", f"/Franchises/Edit/{franchise_id}", values, form_errors(e),
            hidden={"franchise_id": body_id},
        )
    return RedirectResponse("/Franchises/", status_code=303)


@router.get("/Delete/{franchise_id}")
def delete_form(franchise_id: int, request: Request, db: Session = Depends(get_db)):
    franchise = FranchiseService(db).get_entity(franchise_id)
    return render(request, "delete.html", {
        "title": f"Delete franchise {franchise.name}?",
        "action": f"/Franchises/Delete/{franchise_id}",
        "cancel_url": "/Franchises/",
        "details": {
            "Name": franchise.name,
            "Home city": franchise.home_city,
            "Teams": len(franchise.teams),
            "Sponsors": len(franchise.sponsors),
        },
    })


@router.post("/Delete/{franchise_id}")
def delete(franchise_id: int, request: Request, db: Session = Depends(get_db)):
    service = FranchiseService(db)
    try:
        service.delete(franchise_id)
    except RestrictedDeleteError as e:
        franchise = service.get_entity(franchise_id)
        return render(request, "delete.html", {
            "title": f"Delete franchise {franchise.name}?",
            "action": f"/Franchises/Delete/{franchise_id}",
            "cancel_url": "/Franchises/",
            "details": {"Name": franchise.name, "Home city": franchise.home_city},
            "error": e.message,
        }, status_code=e.status_code)
    return RedirectResponse("/Franchises/", status_code=303)
