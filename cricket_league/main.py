from fastapi import FastAPI, Request
import logging
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from cricket_league.core.config import settings
from cricket_league.core.database import init_db
from cricket_league.core.exceptions import LeagueError, ValidationError
from cricket_league.core.templating import render, wants_html
from cricket_league.api import api_router

# Setup logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Toronto Cricket League API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Ensure database tables are created
@app.on_event("startup")
def startup():
    try:
        init_db()
        logger.info("✅ Database connected and tables created.")
    except Exception as e:
        logger.error(f"❌ Database connection error: {e}")
        raise


@app.exception_handler(LeagueError)
async def league_error_handler(request: Request, exc: LeagueError):
    if exc.status_code >= 500:
        logger.error(f"❌ {request.method} {request.url.path}: {exc.message}")
    if wants_html(request):
        return render(
            request, "error.html", {"status_code": exc.status_code, "message": exc.message}, exc.status_code
        )
    content = {"detail": exc.message}
    if isinstance(exc, ValidationError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are answered like any other validation failure (400)."""
    error = ValidationError.from_pydantic(exc)
    if wants_html(request):
        return render(request, "error.html", {"status_code": 400, "message": error.message}, 400)
    return JSONResponse(status_code=400, content={"detail": error.message, "errors": error.errors})


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
def home(request: Request):
    return render(request, "home.html")


# Include all routes
app.include_router(api_router)
