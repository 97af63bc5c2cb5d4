"""Core business logic layer.

Subpackages:
- inventory: add/edit/delete of pantry items and freezer meals
- pantry: freshness helpers (expiry status, freezer age, category classes)
- reporting: dashboard ordering and summary counts
"""
__all__ = ["inventory", "pantry", "reporting"]
