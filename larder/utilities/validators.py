"""
Form input validation using Pydantic.

Names, quantities/portions and free-text notes are trimmed. Category and the
two date fields are stored exactly as submitted.
"""
import re

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError, field_validator

from larder.utilities.exceptions import ValidationError

RECORD_ID_PATTERN = re.compile(r'^[+-]?[0-9]+$')


def _require_name(v: str) -> str:
    if not v:
        raise ValueError('name cannot be empty')
    return v


class PantryItemInput(BaseModel):
    """Schema for pantry add/edit forms."""
    model_config = ConfigDict(validate_default=True)

    name: str = ""
    quantity: str = ""
    category: str = ""
    expiry: str = ""
    notes: str = ""

    @field_validator('name', 'quantity', 'notes')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _require_name(v)


class FreezerMealInput(BaseModel):
    """Schema for freezer add/edit forms."""
    model_config = ConfigDict(validate_default=True)

    name: str = ""
    portions: str = ""
    date_frozen: str = ""
    description: str = ""

    @field_validator('name', 'portions', 'description')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _require_name(v)


def _validate(model, fields, kind: str):
    try:
        return model.model_validate(dict(fields))
    except PydanticValidationError as e:
        err = e.errors()[0]
        field = str(err['loc'][0]) if err.get('loc') else None
        raise ValidationError(f"Invalid {kind}: {err['msg']}", field=field) from e


def validate_pantry_fields(fields) -> PantryItemInput:
    """Validate raw pantry form values; raises ValidationError on a blank name."""
    return _validate(PantryItemInput, fields, 'pantry item')


def validate_freezer_fields(fields) -> FreezerMealInput:
    """Validate raw freezer form values; raises ValidationError on a blank name."""
    return _validate(FreezerMealInput, fields, 'freezer meal')


def parse_record_id(raw) -> int:
    """Parse a submitted record id (plain decimal integer, surrounding spaces allowed)."""
    text = "" if raw is None else str(raw).strip()
    if not RECORD_ID_PATTERN.match(text):
        raise ValidationError(f"Invalid record id: {raw!r}", field='id')
    return int(text)
