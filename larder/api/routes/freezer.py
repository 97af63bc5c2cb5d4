import logging

from fastapi import APIRouter, Depends, Form
from fastapi.responses import RedirectResponse

from larder.api.dependencies import get_inventory
from larder.api.routes.pantry import NON_POST_METHODS
from larder.logic.inventory.service import InventoryService
from larder.utilities.exceptions import NotFoundError, ValidationError

router = APIRouter(prefix="/freezer")
logger = logging.getLogger(__name__)


@router.post("/add")
def add_freezer_meal(
    name: str = Form(""),
    portions: str = Form(""),
    date_frozen: str = Form(""),
    description: str = Form(""),
    inventory: InventoryService = Depends(get_inventory),
):
    fields = {"name": name, "portions": portions, "date_frozen": date_frozen, "description": description}
    try:
        inventory.add_freezer_meal(fields)
    except ValidationError as e:
        logger.info("Freezer add ignored: %s", e)
    return RedirectResponse(url="/", status_code=303)


@router.post("/edit")
def edit_freezer_meal(
    record_id: str = Form("", alias="id"),
    name: str = Form(""),
    portions: str = Form(""),
    date_frozen: str = Form(""),
    description: str = Form(""),
    inventory: InventoryService = Depends(get_inventory),
):
    fields = {"name": name, "portions": portions, "date_frozen": date_frozen, "description": description}
    try:
        inventory.edit_freezer_meal(record_id, fields)
    except (ValidationError, NotFoundError) as e:
        logger.info("Freezer edit ignored: %s", e)
    return RedirectResponse(url="/", status_code=303)


@router.post("/delete")
def delete_freezer_meal(
    record_id: str = Form("", alias="id"),
    inventory: InventoryService = Depends(get_inventory),
):
    try:
        inventory.delete_freezer_meal(record_id)
    except (ValidationError, NotFoundError) as e:
        logger.info("Freezer delete ignored: %s", e)
    return RedirectResponse(url="/", status_code=303)


@router.api_route("/add", methods=NON_POST_METHODS, include_in_schema=False)
@router.api_route("/edit", methods=NON_POST_METHODS, include_in_schema=False)
@router.api_route("/delete", methods=NON_POST_METHODS, include_in_schema=False)
def freezer_non_post():
    return RedirectResponse(url="/", status_code=303)
