# simplecraft/items/inventory/display.py
from typing import TYPE_CHECKING, cast
from simplecraft.config import (
    FORMAT_CATEGORY, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_TITLE
)

if TYPE_CHECKING:
    from simplecraft.items.inventory.core import Inventory

class InventoryDisplayMixin:
    """Mixin for generating text representations of the inventory."""

    def list_items(self) -> str:
        # Cast self to Inventory to satisfy static analysis
        inventory = cast('Inventory', self)

        result = [f"{FORMAT_TITLE}INVENTORY{FORMAT_RESET}"]
        stocked = [(slot.item, slot.quantity) for slot in inventory.slots if slot.item]
        if not stocked:
            result.append(f"{FORMAT_CATEGORY}Your inventory is empty.{FORMAT_RESET}")
            return "\n".join(result)

        for item, quantity in stocked:
            item_text = f"- {FORMAT_HIGHLIGHT}{item.name}{FORMAT_RESET} (x{quantity})"
            result.append(f"{item_text} [id {item.item_id}]")

        result.append(f"\n{FORMAT_CATEGORY}Total items:{FORMAT_RESET} {inventory.total_quantity()}")
        return "\n".join(result)
