"""
Items Package.
Item records, the item registry crafted outputs are resolved against,
and the player inventory.
"""
from .item import Item
from .item_registry import ItemRegistry
