from datetime import date
from typing import Dict, Iterable, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import NoInspectionAvailable


def years_ago(years: int, today: Optional[date] = None) -> date:
    """Return today's date moved back `years` years (Feb 29 falls back to Feb 28)."""
    today = today or date.today()
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        return today.replace(year=today.year - years, day=28)


def clean_form(data: Dict[str, Optional[str]], required: Iterable[str] = ()) -> Dict[str, Optional[str]]:
    """Strip submitted form values; blank optional fields become None."""
    cleaned = {}
    for key, value in data.items():
        if isinstance(value, str):
            value = value.strip()
            if not value and key not in required:
                value = None
        cleaned[key] = value
    return cleaned


def loaded_relation(entity, name: str):
    """Return a relation only if it is already loaded; never issue a lazy load."""
    try:
        state = inspect(entity)
    except NoInspectionAvailable:
        return getattr(entity, name, None)
    if name in state.unloaded:
        return None
    return getattr(entity, name)
