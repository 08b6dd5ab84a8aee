# simplecraft/items/item.py
from typing import Any, Dict, Optional

class Item:
    """A registry entry: a kind of item the inventory can hold any number of."""

    def __init__(self, item_id: int, name: str, description: str = ""):
        self.item_id = item_id
        self.name = name
        self.description = description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.item_id == other.item_id

    def __hash__(self) -> int:
        return hash(self.item_id)

    def __repr__(self) -> str:
        return f"Item({self.item_id}, {self.name!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.item_id, "name": self.name, "description": self.description}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['Item']:
        """Build an item from a data record. Returns None for malformed records."""
        item_id = data.get("id")
        name = data.get("name")
        if not isinstance(item_id, int) or isinstance(item_id, bool) or item_id <= 0:
            return None
        if not isinstance(name, str):
            return None
        return cls(item_id, name, data.get("description", "") or "")
