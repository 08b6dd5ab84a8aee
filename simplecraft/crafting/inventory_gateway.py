# simplecraft/crafting/inventory_gateway.py
from typing import List, Optional, Protocol

from simplecraft.items.item import Item

class InventoryGateway(Protocol):
    """What the crafting session needs from the host's item store."""

    def items(self) -> List[Item]:
        """Items currently in stock, in display order."""
        ...

    def add_item(self, item: Item, quantity: int = 1) -> int:
        ...

    def remove_item(self, item_id: int, quantity: int = 1) -> int:
        ...

class ItemLookup(Protocol):
    """Resolves crafted item names to grantable items."""

    def find_by_name(self, name: str) -> Optional[Item]:
        ...
