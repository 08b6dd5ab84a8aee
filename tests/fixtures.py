# tests/fixtures.py
import unittest
from typing import List

from simplecraft.core.game_manager import GameManager
from simplecraft.crafting import RecipeCatalog
from simplecraft.items import ItemRegistry
from simplecraft.items.inventory import Inventory
from simplecraft.utils.logger import LogLevel, Logger

ITEM_DATA = [
    None,
    {"id": 1, "name": "Flint"},
    {"id": 2, "name": "Iron"},
    {"id": 3, "name": "Sulfur"},
    {"id": 4, "name": "Stinger"},
    {"id": 5, "name": "Hide"},
    {"id": 6, "name": "Slime Residue"},
    {"id": 7, "name": "Striker"},
    {"id": 8, "name": "Sparkpowder"},
    {"id": 9, "name": "Crude Bomb"},
]

RECIPE_DATA = [
    None,
    {"id": 1, "name": "a Striker", "crafts": ["Striker"], "ingredients": ["Flint", "Iron"]},
    {"id": 2, "name": "some Sparkpowder", "crafts": ["Sparkpowder", "Sparkpowder", "Sparkpowder"],
     "ingredients": ["Iron", "Sulfur", "Stinger"]},
    {"id": 3, "name": "a Crude Bomb", "crafts": ["Crude Bomb"],
     "ingredients": ["Hide", "Slime Residue", "Striker", "Sparkpowder"]},
]

# Item ids, for readability
FLINT, IRON, SULFUR, STINGER, HIDE, SLIME, STRIKER, SPARKPOWDER, BOMB = range(1, 10)

class CraftingTestBase(unittest.TestCase):
    """Base class for tests that need a full in-memory game (no data files)."""

    return_items_on_fail = True
    recipe_data: List = RECIPE_DATA

    def setUp(self):
        # Keep test output clean
        self._old_level = Logger.get_level()
        Logger.set_level(LogLevel.CRITICAL)

        self.registry = ItemRegistry.from_data(ITEM_DATA)
        self.catalog = RecipeCatalog.from_data(self.recipe_data)
        self.inventory = Inventory()
        self.game = GameManager(self.registry, self.catalog, self.inventory,
                                return_items_on_fail=self.return_items_on_fail)
        self.session = self.game.crafting_session

    def tearDown(self):
        Logger.set_level(self._old_level)

    def give(self, item_id: int, quantity: int = 1):
        item = self.registry.get(item_id)
        if not item:
            self.fail(f"No test item with id {item_id}")
        self.inventory.add_item(item, quantity)

    def stock(self) -> dict:
        """Snapshot of {item_id: quantity} for every stocked item."""
        return {item.item_id: self.inventory.count_item(item.item_id) for item in self.inventory.items()}
