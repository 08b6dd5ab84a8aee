# simplecraft/items/inventory/__init__.py
"""
Inventory Package.
Manages item stacks, display text, and the starting-inventory data format.
"""
from .slot import InventorySlot
from .core import Inventory
