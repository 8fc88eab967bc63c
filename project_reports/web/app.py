"""
FastAPI Web Application - Project Reports Portal
================================================

JSON API for the public site:
    GET  /api/project-report-categories   -> ["Annual", "Audits", ...]
    GET  /api/project-reports?category=X  -> [{"name": ..., "file": ...}, ...]
    POST /api/contact                     -> saves {name, email, mobile} to Excel

Everything else is served as static files from the public directory,
including the report PDFs under /ProjectReports2/<category>/<file>.
"""

import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ConfigDict

from ..domain import ValidationError, NotFoundError, StoreError
from ..infrastructure.config import Settings, get_settings
from ..infrastructure.reports import ReportCatalog
from ..infrastructure.persistence import ContactStore

logging.basicConfig(
    level=get_settings().log_level,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

CONTACT_PATH = "/api/contact"

# ── Error Messages ─────────────────────────────────────────────────
CATEGORIES_ERROR = "Unable to list categories"
CATEGORY_REQUIRED = "Category is required."
CATEGORY_INVALID = "Invalid category."
REPORTS_ERROR = "Unable to list files for the specified category"
CONTACT_FIELDS_REQUIRED = "All fields are required."
CONTACT_SAVE_ERROR = "Failed to save contact."
CONTACT_SAVED = "Contact saved."


class ContactSubmission(BaseModel):
    """Contact form body. Fields are optional here so missing ones become a 400, not a 422."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None

    def required_fields(self) -> tuple:
        """
        (name, email, mobile) as submitted. Whitespace-only values count as missing.

        Raises:
            ValidationError: any field is missing or blank
        """
        values = (self.name, self.email, self.mobile)
        if not all(value and value.strip() for value in values):
            raise ValidationError(CONTACT_FIELDS_REQUIRED)
        return values


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# ══════════════════════════════════════════════════════════════════
#  ROUTES
# ══════════════════════════════════════════════════════════════════

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok"}


# ── Reports ────────────────────────────────────────────────────

@router.get("/api/project-report-categories")
def list_categories(request: Request):
    catalog: ReportCatalog = request.app.state.catalog
    try:
        return catalog.list_categories()
    except NotFoundError as e:
        logger.exception(f"Error reading categories directory: {e}")
        return _error(500, CATEGORIES_ERROR)


@router.get("/api/project-reports")
def list_reports(request: Request, category: Optional[str] = None):
    if not category or not category.strip():
        return _error(400, CATEGORY_REQUIRED)

    catalog: ReportCatalog = request.app.state.catalog
    try:
        reports = catalog.list_reports(category)
    except ValidationError as e:
        logger.warning(f"Rejected category {category!r}: {e}")
        return _error(400, CATEGORY_INVALID)
    except NotFoundError as e:
        logger.exception(f"Error listing files in category: {e}")
        return _error(500, REPORTS_ERROR)

    return [report.to_dict() for report in reports]


# ── Contact ────────────────────────────────────────────────────

@router.post(CONTACT_PATH, status_code=201)
def save_contact(request: Request, submission: Optional[ContactSubmission] = None):
    try:
        name, email, mobile = (submission or ContactSubmission()).required_fields()
    except ValidationError as e:
        return _error(400, str(e))

    store: ContactStore = request.app.state.contact_store
    try:
        store.append_contact(name=name, email=email, mobile=mobile)
    except StoreError as e:
        logger.exception(f"Error saving contact to Excel: {e}")
        return _error(500, CONTACT_SAVE_ERROR)

    return {"success": True, "message": CONTACT_SAVED}


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and query strings get the API's {"error": ...} shape with a 400."""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    if request.url.path == CONTACT_PATH:
        return _error(400, CONTACT_FIELDS_REQUIRED)
    return _error(400, "Invalid request.")


# ══════════════════════════════════════════════════════════════════
#  APP FACTORY
# ══════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[ReportCatalog] = None,
    contact_store: Optional[ContactStore] = None,
) -> FastAPI:
    """Build the application. Components default to ones built from settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        for issue in settings.validate():
            if issue.startswith("INFO"):
                logger.info(issue)
            else:
                logger.warning(issue)
        logger.info(f"Server is running at http://{settings.host}:{settings.port}")
        yield

    app = FastAPI(
        title="Project Reports Portal",
        description="Report listings and contact form backend",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.catalog = catalog or ReportCatalog(settings.reports_dir, settings.reports_url_prefix)
    app.state.contact_store = contact_store or ContactStore(settings.contacts_file)

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(router)

    # Mounted last so the API routes take precedence
    if settings.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")
    else:
        logger.warning(f"Public directory {settings.public_dir} not found; static files disabled")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
