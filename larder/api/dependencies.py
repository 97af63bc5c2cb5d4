"""
API dependencies for dependency injection.

create_app() stores the service and templates on app.state; routes reach them
through these helpers instead of module-level globals.
"""
from fastapi import Request
from fastapi.templating import Jinja2Templates

from larder.logic.inventory.service import InventoryService


def get_inventory(request: Request) -> InventoryService:
    """
    Usage:
        @router.post("/example")
        def example(inventory: InventoryService = Depends(get_inventory)):
            ...
    """
    return request.app.state.inventory


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
