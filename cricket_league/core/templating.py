from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from fastapi import Request
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError as PydanticValidationError

from cricket_league.core.exceptions import ValidationError

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))


def wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


def render(request: Request, name: str, context: Optional[Dict[str, Any]] = None, status_code: int = 200):
    return templates.TemplateResponse(request, name, context or {}, status_code=status_code)


def form_field(name: str, label: str, value=None, type: str = "text",
               options: Optional[Iterable[Tuple[Any, str]]] = None, required: bool = False) -> Dict[str, Any]:
    return {
        "name": name,
        "label": label,
        "value": "" if value is None else value,
        "type": "select" if options is not None else type,
        "options": list(options) if options is not None else [],
        "required": required,
    }


def form_errors(exc) -> Dict[str, str]:
    """Field -> message for either kind of validation failure."""
    if isinstance(exc, PydanticValidationError):
        exc = ValidationError.from_pydantic(exc)
    return exc.as_dict()


def render_form(request: Request, title: str, action: str, cancel_url: str,
                fields: List[Dict[str, Any]], errors: Optional[Dict[str, str]] = None,
                hidden: Optional[Dict[str, Any]] = None, related: Optional[List[Dict[str, Any]]] = None):
    """Render form.html; ``related`` adds linked-record lists under the form."""
    return render(
        request,
        "form.html",
        {
            "title": title,
            "action": action,
            "cancel_url": cancel_url,
            "fields": fields,
            "hidden": hidden or {},
            "errors": errors or {},
            "related": related or [],
        },
        status_code=400 if errors else 200,
    )
