import logging

from fastapi import APIRouter, Depends, Form
from fastapi.responses import RedirectResponse

from larder.api.dependencies import get_inventory
from larder.logic.inventory.service import InventoryService
from larder.utilities.exceptions import NotFoundError, ValidationError

router = APIRouter(prefix="/pantry")
logger = logging.getLogger(__name__)

NON_POST_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _home():
    return RedirectResponse(url="/", status_code=303)


@router.post("/add")
def add_pantry_item(
    name: str = Form(""),
    quantity: str = Form(""),
    category: str = Form(""),
    expiry: str = Form(""),
    notes: str = Form(""),
    inventory: InventoryService = Depends(get_inventory),
):
    fields = {"name": name, "quantity": quantity, "category": category, "expiry": expiry, "notes": notes}
    try:
        inventory.add_pantry_item(fields)
    except ValidationError as e:
        logger.info("Pantry add ignored: %s", e)
    return _home()


@router.post("/edit")
def edit_pantry_item(
    record_id: str = Form("", alias="id"),
    name: str = Form(""),
    quantity: str = Form(""),
    category: str = Form(""),
    expiry: str = Form(""),
    notes: str = Form(""),
    inventory: InventoryService = Depends(get_inventory),
):
    fields = {"name": name, "quantity": quantity, "category": category, "expiry": expiry, "notes": notes}
    try:
        inventory.edit_pantry_item(record_id, fields)
    except (ValidationError, NotFoundError) as e:
        logger.info("Pantry edit ignored: %s", e)
    return _home()


@router.post("/delete")
def delete_pantry_item(
    record_id: str = Form("", alias="id"),
    inventory: InventoryService = Depends(get_inventory),
):
    try:
        inventory.delete_pantry_item(record_id)
    except (ValidationError, NotFoundError) as e:
        logger.info("Pantry delete ignored: %s", e)
    return _home()


# Anything but POST on a mutating path just goes back to the dashboard
@router.api_route("/add", methods=NON_POST_METHODS, include_in_schema=False)
@router.api_route("/edit", methods=NON_POST_METHODS, include_in_schema=False)
@router.api_route("/delete", methods=NON_POST_METHODS, include_in_schema=False)
def pantry_non_post():
    return _home()
