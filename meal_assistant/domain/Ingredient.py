"""Recipe ingredient entity: name, optional quantity and unit, optional flag."""
from typing import Optional


class Ingredient:
    def __init__(self, name: str = "", quantity: Optional[float] = None, unit: Optional[str] = None,
                 is_optional: bool = False, id: str = ""):
        self.id = id
        self.name = name
        # None for "to taste" items
        self.quantity = quantity
        self.unit = unit or None
        self.is_optional = bool(is_optional)

    def __str__(self) -> str:
        amount = "" if self.quantity is None else f"{self.quantity:g}"
        parts = [p for p in (amount, self.unit or "", self.name) if p]
        text = " ".join(parts)
        return f"{text} (optional)" if self.is_optional else text

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Accepts camelCase keys, ignores unknown ones.'''
        d = dict(data) if isinstance(data, dict) else {}
        quantity = d.get("quantity")
        if quantity is not None and quantity != "":
            try:
                quantity = float(quantity)
            except (TypeError, ValueError):
                quantity = None
        else:
            quantity = None
        return Ingredient(
            name=d.get("name", ""),
            quantity=quantity,
            unit=d.get("unit") or None,
            is_optional=d.get("is_optional", d.get("isOptional", False)),
            id=str(d.get("id", "")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "is_optional": self.is_optional,
        }
