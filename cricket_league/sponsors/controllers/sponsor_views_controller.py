from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from cricket_league.core.database import get_db
from cricket_league.core.exceptions import ValidationError
from cricket_league.core.templating import form_errors, form_field, render, render_form
from cricket_league.core.utils import clean_form
from cricket_league.franchises.services.franchise_service import FranchiseService
from cricket_league.sponsors.schemas.sponsor_schema import SponsorIn
from cricket_league.sponsors.services.sponsor_service import SponsorService

router = APIRouter(default_response_class=HTMLResponse)

REQUIRED = ("name", "franchise_id")


def sponsor_form(request: Request, db: Session, title: str, action: str, values: dict, errors=None, hidden=None):
    fields = [
        form_field("name", "Name", values.get("name"), required=True),
        form_field("logo_url", "Logo URL", values.get("logo_url"), type="url"),
        form_field(
            "franchise_id", "Franchise", values.get("franchise_id"),
            options=FranchiseService(db).choices(), required=True,
        ),
    ]
    return render_form(request, title, action, "/Sponsors/", fields, errors, hidden)


@router.get("/")
def index(request: Request, db: Session = Depends(get_db)):
    sponsors = SponsorService(db).list_entities()
    return render(request, "sponsors/index.html", {"sponsors": sponsors})


@router.get("/Details/{sponsor_id}")
def details(sponsor_id: int, request: Request, db: Session = Depends(get_db)):
    sponsor = SponsorService(db).get_entity(sponsor_id)
    return render(request, "sponsors/details.html", {"sponsor": sponsor})


@router.get("/Create")
def create_form(request: Request, db: Session = Depends(get_db)):
    return sponsor_form(request, db, "Create sponsor", "/Sponsors/Create", {})


@router.post("/Create")
def create(
    request: Request,
    name: str = Form(""),
    logo_url: str = Form(""),
    franchise_id: str = Form(""),
    db: Session = Depends(get_db),
):
    values = clean_form({"name": name, "logo_url": logo_url, "franchise_id": franchise_id}, required=REQUIRED)
    try:
        sponsor = SponsorService(db).create(SponsorIn(**values))
    except (PydanticValidationError, ValidationError) as e:
        return sponsor_form(request, db, "Create sponsor", "/Sponsors/Create", values, form_errors(e))
    # Back to the franchise the sponsor was added to
    return RedirectResponse(f"/Franchises/Edit/{sponsor.franchise_id}", status_code=303)


@router.get("/Edit/{sponsor_id}")
def edit_form(sponsor_id: int, request: Request, db: Session = Depends(get_db)):
    sponsor = SponsorService(db).get_entity(sponsor_id)
    values = {"name": sponsor.name, "logo_url": sponsor.logo_url, "franchise_id": sponsor.franchise_id}
    return sponsor_form(
        request, db, f"Edit {sponsor.name}", f"/Sponsors/Edit/{sponsor_id}", values, hidden={"sponsor_id": sponsor_id}
    )


@router.post("/Edit/{sponsor_id}")
def edit(
    sponsor_id: int,
    request: Request,
    body_id: int = Form(..., alias="sponsor_id"),
    name: str = Form(""),
    logo_url: str = Form(""),
    franchise_id: str = Form(""),
    db: Session = Depends(get_db),
):
    values = clean_form({"name": name, "logo_url": logo_url, "franchise_id": franchise_id}, required=REQUIRED)
    try:
        SponsorService(db).update(sponsor_id, body_id, SponsorIn(**values))
    except (PydanticValidationError, ValidationError) as e:
        return sponsor_form(
            request, db, "Edit sponsor", f"/Sponsors/Edit/{sponsor_id}", values, form_errors(e),
            hidden={"sponsor_id": body_id},
        )
    return RedirectResponse("/Sponsors/", status_code=303)


@router.get("/Delete/{sponsor_id}")
def delete_form(sponsor_id: int, request: Request, db: Session = Depends(get_db)):
    sponsor = SponsorService(db).get_entity(sponsor_id)
    return render(request, "delete.html", {
        "title": f"Delete sponsor {sponsor.name}?",
        "action": f"/Sponsors/Delete/{sponsor_id}",
        "cancel_url": "/Sponsors/",
        "details": {
            "Name": sponsor.name,
            "Franchise": sponsor.franchise.name if sponsor.franchise else "Unknown",
            "Teams": len(sponsor.teams),
        },
    })


@router.post("/Delete/{sponsor_id}")
def delete(sponsor_id: int, db: Session = Depends(get_db)):
    SponsorService(db).delete(sponsor_id)
    return RedirectResponse("/Sponsors/", status_code=303)
