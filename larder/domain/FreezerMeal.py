"""FreezerMeal domain entity: a cooked meal portioned into the freezer."""
from larder.domain.PantryItem import _require_int, _text


class FreezerMeal:
    FIELDS = ("name", "portions", "date_frozen", "description")

    def __init__(self, id: int, name: str = "", portions: str = "", date_frozen: str = "",
                 description: str = ""):
        self.id = id
        self.name = name
        self.portions = portions
        self.date_frozen = date_frozen
        self.description = description

    def update(self, name: str, portions: str, date_frozen: str, description: str):
        self.name = name
        self.portions = portions
        self.date_frozen = date_frozen
        self.description = description

    def __str__(self) -> str:
        parts = [f"#{self.id} {self.name}"]
        if self.portions:
            parts.append(f"{self.portions} portions")
        if self.date_frozen:
            parts.append(f"Frozen: {self.date_frozen}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        if not isinstance(data, dict):
            raise ValueError(f"freezer meal must be an object, got {type(data).__name__}")
        return FreezerMeal(
            id=_require_int(data.get("id"), "id"),
            **{k: _text(data.get(k)) for k in FreezerMeal.FIELDS},
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "portions": self.portions,
            "date_frozen": self.date_frozen,
            "description": self.description,
        }
