from typing import Optional
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from larder.api.dependencies import get_inventory, get_templates
from larder.api.routes import freezer, pantry
from larder.infra.paths import INDEX_TEMPLATE, TEMPLATES_DIR
from larder.infra.repository_factory import build_repository
from larder.logic.inventory.service import InventoryService
from larder.logic.pantry.freshness import (
    category_class,
    days_in_freezer,
    freezer_age_class,
    is_expired,
    is_expiring_soon,
)
from larder.utilities.config import Settings, load_settings
from larder.utilities.exceptions import StorageError

# Logging
logger = logging.getLogger("larder_app")

TEMPLATE_HELPERS = {
    "is_expired": is_expired,
    "is_expiring_soon": is_expiring_soon,
    "category_class": category_class,
    "days_in_freezer": days_in_freezer,
    "freezer_age_class": freezer_age_class,
}


def build_templates(directory=TEMPLATES_DIR) -> Jinja2Templates:
    """Jinja2 environment with the freshness helpers available as template globals."""
    templates = Jinja2Templates(directory=str(directory))
    templates.env.globals.update(TEMPLATE_HELPERS)
    return templates


async def storage_exception_handler(request: Request, exc: StorageError):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(f"Failed to {exc.operation} data", status_code=500)


# -------------------- UI PAGES --------------------
def index(
    request: Request,
    inventory: InventoryService = Depends(get_inventory),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = inventory.dashboard()
    try:
        return templates.TemplateResponse(request, INDEX_TEMPLATE, context)
    except TemplateError:
        logger.exception("Template error while rendering %s", INDEX_TEMPLATE)
        return PlainTextResponse("Failed to render page", status_code=500)


def create_app(settings: Optional[Settings] = None, repository=None,
               templates: Optional[Jinja2Templates] = None) -> FastAPI:
    """Build the web app. Repository and templates are created once here and shared by all requests."""
    settings = settings or load_settings()
    if repository is None:
        repository = build_repository(settings)

    app = FastAPI(title="Larder: Pantry & Freezer", debug=settings.debug)
    app.state.settings = settings
    app.state.inventory = InventoryService(repository)
    app.state.templates = templates or build_templates()

    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_api_route("/", index, methods=["GET"], response_class=HTMLResponse)
    app.include_router(pantry.router)
    app.include_router(freezer.router)
    return app
