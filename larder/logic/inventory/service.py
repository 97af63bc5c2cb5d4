"""Inventory mutations: add/edit/delete for pantry items and freezer meals.

Every call loads the full store from the repository, applies one change and
saves the full store back. Validation failures raise ValidationError and a
missing target raises NotFoundError; in both cases nothing is saved.
"""
from __future__ import annotations
import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from larder.domain.FreezerMeal import FreezerMeal
from larder.domain.PantryItem import PantryItem
from larder.domain.Store import Store
from larder.logic.reporting.dashboard import build_dashboard
from larder.utilities.exceptions import NotFoundError
from larder.utilities.validators import parse_record_id, validate_freezer_fields, validate_pantry_fields

logger = logging.getLogger(__name__)


class InventoryService:
    def __init__(self, repository):
        self.repository = repository

    def load(self) -> Store:
        return self.repository.load()

    def dashboard(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        return build_dashboard(self.repository.load(), now)

    # --- Pantry -----------------------------------------------------------
    def add_pantry_item(self, fields: Mapping[str, str]) -> PantryItem:
        store = self.repository.load()
        data = validate_pantry_fields(fields)
        item = store.add_pantry_item(**data.model_dump())
        self.repository.save(store)
        logger.info("Added pantry item %s", item)
        return item

    def edit_pantry_item(self, raw_id, fields: Mapping[str, str]) -> PantryItem:
        item_id = parse_record_id(raw_id)
        store = self.repository.load()
        data = validate_pantry_fields(fields)
        item = store.find_pantry_item(item_id)
        if item is None:
            raise NotFoundError('pantry item', item_id)
        item.update(**data.model_dump())
        self.repository.save(store)
        logger.info("Updated pantry item %s", item)
        return item

    def delete_pantry_item(self, raw_id) -> int:
        item_id = parse_record_id(raw_id)
        store = self.repository.load()
        if not store.remove_pantry_item(item_id):
            raise NotFoundError('pantry item', item_id)
        self.repository.save(store)
        logger.info("Removed pantry item #%s", item_id)
        return item_id

    # --- Freezer ----------------------------------------------------------
    def add_freezer_meal(self, fields: Mapping[str, str]) -> FreezerMeal:
        store = self.repository.load()
        data = validate_freezer_fields(fields)
        meal = store.add_freezer_meal(**data.model_dump())
        self.repository.save(store)
        logger.info("Added freezer meal %s", meal)
        return meal

    def edit_freezer_meal(self, raw_id, fields: Mapping[str, str]) -> FreezerMeal:
        meal_id = parse_record_id(raw_id)
        store = self.repository.load()
        data = validate_freezer_fields(fields)
        meal = store.find_freezer_meal(meal_id)
        if meal is None:
            raise NotFoundError('freezer meal', meal_id)
        meal.update(**data.model_dump())
        self.repository.save(store)
        logger.info("Updated freezer meal %s", meal)
        return meal

    def delete_freezer_meal(self, raw_id) -> int:
        meal_id = parse_record_id(raw_id)
        store = self.repository.load()
        if not store.remove_freezer_meal(meal_id):
            raise NotFoundError('freezer meal', meal_id)
        self.repository.save(store)
        logger.info("Removed freezer meal #%s", meal_id)
        return meal_id
