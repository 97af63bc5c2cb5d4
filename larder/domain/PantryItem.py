"""PantryItem domain entity: shelf-stable stock with an optional expiry date."""


def _require_int(value, field: str) -> int:
    # bool is an int subclass but never a valid id or counter
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{field}' must be an integer, got {value!r}")
    return value


def _text(value) -> str:
    return "" if value is None else str(value)


class PantryItem:
    FIELDS = ("name", "quantity", "category", "expiry", "notes")

    def __init__(self, id: int, name: str = "", quantity: str = "", category: str = "",
                 expiry: str = "", notes: str = ""):
        self.id = id
        self.name = name
        self.quantity = quantity
        self.category = category
        # "YYYY-MM-DD" or "" for no expiry; kept as text so it sorts and persists verbatim
        self.expiry = expiry
        self.notes = notes

    def update(self, name: str, quantity: str, category: str, expiry: str, notes: str):
        '''Overwrites every mutable field.'''
        self.name = name
        self.quantity = quantity
        self.category = category
        self.expiry = expiry
        self.notes = notes

    def __str__(self) -> str:
        parts = [f"#{self.id} {self.name}"]
        if self.quantity:
            parts.append(self.quantity)
        if self.expiry:
            parts.append(f"Exp: {self.expiry}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a PantryItem from a persisted dictionary. Ignores unknown keys.'''
        if not isinstance(data, dict):
            raise ValueError(f"pantry item must be an object, got {type(data).__name__}")
        return PantryItem(
            id=_require_int(data.get("id"), "id"),
            **{k: _text(data.get(k)) for k in PantryItem.FIELDS},
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "category": self.category,
            "expiry": self.expiry,
            "notes": self.notes,
        }
