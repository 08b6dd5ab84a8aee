# simplecraft/items/inventory/slot.py
from typing import Optional, Tuple
from simplecraft.items.item import Item

class InventorySlot:
    """A stack of one kind of item."""

    def __init__(self, item: Optional[Item] = None, quantity: int = 1):
        self.item = item
        self.quantity = max(0, quantity) if item else 0 # Quantity is 0 if no item

    def add(self, item: Item, quantity: int = 1) -> int:
        """Adds quantity to the stack, or starts a new stack if empty."""
        if quantity <= 0:
            return 0

        if not self.item:
            self.item = item
            self.quantity = quantity
            return quantity

        if self.item.item_id == item.item_id:
            self.quantity += quantity
            return quantity

        return 0 # Different item, could not add to this slot

    def remove(self, quantity: int = 1) -> Tuple[Optional[Item], int]:
        """Removes quantity, clears slot if quantity becomes zero."""
        if not self.item or quantity <= 0: return None, 0

        quantity_to_remove = min(self.quantity, quantity)
        removed_item = self.item

        self.quantity -= quantity_to_remove

        if self.quantity <= 0:
            self.item = None
            self.quantity = 0

        return removed_item, quantity_to_remove
