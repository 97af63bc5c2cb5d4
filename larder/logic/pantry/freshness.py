"""Freshness helpers used by the dashboard template.

All helpers take the raw stored date string ("YYYY-MM-DD" or "") and an
optional `now` (naive local datetime). An empty or unparseable date never
counts as expired, expiring or aged.
"""
from __future__ import annotations
import re
from datetime import datetime, timedelta
from typing import Optional

from larder.utilities.constants import (
    AGE_FRESH,
    AGE_MEDIUM,
    AGE_OLD,
    CATEGORY_CLASSES,
    DATE_FORMAT,
    DAYS_BEFORE_EXPIRY,
    DEFAULT_CATEGORY_CLASS,
    FREEZER_FRESH_MAX_DAYS,
    FREEZER_MEDIUM_MAX_DAYS,
)

__all__ = [
    "parse_date", "is_expired", "is_expiring_soon", "category_class",
    "days_in_freezer", "freezer_age_class",
]

ISO_DATE_PATTERN = re.compile(r'^[0-9]{4}-[0-9]{2}-[0-9]{2}$')


def parse_date(value: str) -> Optional[datetime]:
    """Return local midnight of a strict YYYY-MM-DD string, or None."""
    if not value or not ISO_DATE_PATTERN.match(value):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return None


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now()


def is_expired(expiry: str, now: Optional[datetime] = None) -> bool:
    """True once the current moment is past the start of the expiry day."""
    exp = parse_date(expiry)
    if exp is None:
        return False
    return _now(now) > exp


def is_expiring_soon(expiry: str, now: Optional[datetime] = None) -> bool:
    """True for items not yet expired whose expiry falls within the next DAYS_BEFORE_EXPIRY days."""
    exp = parse_date(expiry)
    if exp is None:
        return False
    current = _now(now)
    return not current > exp and exp < current + timedelta(days=DAYS_BEFORE_EXPIRY)


def category_class(category: str) -> str:
    return CATEGORY_CLASSES.get(category, DEFAULT_CATEGORY_CLASS)


def days_in_freezer(date_frozen: str, now: Optional[datetime] = None) -> int:
    """Whole days since the meal was frozen; 0 for missing, bad or future dates."""
    frozen = parse_date(date_frozen)
    if frozen is None:
        return 0
    return max((_now(now) - frozen).days, 0)


def freezer_age_class(date_frozen: str, now: Optional[datetime] = None) -> str:
    days = days_in_freezer(date_frozen, now)
    if days > FREEZER_MEDIUM_MAX_DAYS:
        return AGE_OLD
    if days > FREEZER_FRESH_MAX_DAYS:
        return AGE_MEDIUM
    return AGE_FRESH
