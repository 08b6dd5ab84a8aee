# simplecraft/items/inventory/core.py
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from simplecraft.items.item import Item
from simplecraft.utils.logger import Logger
from .slot import InventorySlot
from .display import InventoryDisplayMixin

if TYPE_CHECKING:
    from simplecraft.items.item_registry import ItemRegistry

class Inventory(InventoryDisplayMixin):
    """
    Ordered stacks of items. This is the store the crafting session
    draws ingredients from and grants crafted items to; the session only
    uses items(), add_item() and remove_item().
    """

    def __init__(self):
        self.slots: List[InventorySlot] = []

    def items(self) -> List[Item]:
        """Items currently in stock (quantity >= 1), in slot order."""
        return [slot.item for slot in self.slots if slot.item and slot.quantity > 0]

    def add_item(self, item: Item, quantity: int = 1) -> int:
        """Add units of an item, stacking onto an existing slot when there is one."""
        if quantity <= 0:
            return 0

        for slot in self.slots:
            if slot.item and slot.item.item_id == item.item_id:
                return slot.add(item, quantity)

        # Reuse a cleared slot before growing the list
        empty_slot = next((slot for slot in self.slots if not slot.item), None)
        if not empty_slot:
            empty_slot = InventorySlot()
            self.slots.append(empty_slot)
        return empty_slot.add(item, quantity)

    def remove_item(self, item_id: int, quantity: int = 1) -> int:
        """Remove up to `quantity` units of an item. Returns the number removed."""
        removed = 0
        for slot in self.slots:
            if removed >= quantity:
                break
            if slot.item and slot.item.item_id == item_id:
                _, count = slot.remove(quantity - removed)
                removed += count
        return removed

    def count_item(self, item_id: int) -> int:
        return sum(slot.quantity for slot in self.slots
                   if slot.item and slot.item.item_id == item_id)

    def find_item_by_id(self, item_id: int) -> Optional[Item]:
        for slot in self.slots:
            if slot.item and slot.item.item_id == item_id:
                return slot.item
        return None

    def total_quantity(self) -> int:
        return sum(slot.quantity for slot in self.slots if slot.item)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize as item references: {"items": [{"id": 1, "quantity": 2}, ...]}."""
        return {
            "items": [{"id": slot.item.item_id, "quantity": slot.quantity}
                      for slot in self.slots if slot.item]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], registry: 'ItemRegistry') -> 'Inventory':
        inventory = cls()
        for entry in data.get("items", []):
            if not isinstance(entry, dict):
                Logger.warning("Inventory", f"Skipping inventory entry {entry!r}: not an object.")
                continue
            item = registry.get(entry.get("id"))
            if not item:
                Logger.warning("Inventory", f"Skipping unknown item id {entry.get('id')!r}.")
                continue
            quantity = entry.get("quantity", 1)
            if not isinstance(quantity, int) or quantity <= 0:
                Logger.warning("Inventory", f"Skipping '{item.name}': invalid quantity {quantity!r}.")
                continue
            inventory.add_item(item, quantity)
        return inventory
