# simplecraft/items/item_registry.py
import json
import os
from typing import Any, Dict, Iterator, List, Optional

from simplecraft.items.item import Item
from simplecraft.utils.logger import Logger

class ItemRegistry:
    """
    Static item database, loaded once.
    Stored as a JSON array whose element 0 is a null placeholder, so an
    item's id is normally its position.
    """

    def __init__(self, items: Optional[List[Item]] = None):
        self._items: List[Item] = []
        self._by_id: Dict[int, Item] = {}
        for item in items or []:
            self._register(item)

    def _register(self, item: Item) -> bool:
        if item.item_id in self._by_id:
            Logger.warning("ItemRegistry", f"Duplicate item id {item.item_id} ('{item.name}'); keeping the first.")
            return False
        self._items.append(item)
        self._by_id[item.item_id] = item
        return True

    @classmethod
    def from_data(cls, records: List[Any]) -> 'ItemRegistry':
        registry = cls()
        for index, record in enumerate(records):
            if index == 0:
                # Reserved slot
                continue
            if not isinstance(record, dict):
                Logger.warning("ItemRegistry", f"Skipping item record {index}: not an object.")
                continue
            item = Item.from_dict(record)
            if not item:
                Logger.warning("ItemRegistry", f"Skipping item record {index}: needs a positive int 'id' and a 'name'.")
                continue
            registry._register(item)
        Logger.info("ItemRegistry", f"Loaded {len(registry)} items.")
        return registry

    @classmethod
    def load(cls, file_path: str) -> 'ItemRegistry':
        """Load from a JSON file. A missing or unreadable file gives an empty registry."""
        if not os.path.exists(file_path):
            Logger.warning("ItemRegistry", f"Item file not found: {file_path}")
            return cls()
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            Logger.error("ItemRegistry", f"Error loading items from {file_path}: {e}")
            return cls()
        if not isinstance(data, list):
            Logger.error("ItemRegistry", f"Item file {file_path} must contain a JSON array.")
            return cls()
        return cls.from_data(data)

    def get(self, item_id: int) -> Optional[Item]:
        return self._by_id.get(item_id)

    def find_by_name(self, name: str) -> Optional[Item]:
        """First item in registry order whose name matches exactly."""
        for item in self._items:
            if item.name == name:
                return item
        return None

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
