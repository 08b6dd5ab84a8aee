# simplecraft/crafting/session.py
from enum import Enum
from typing import List, Optional

from simplecraft.config import NO_RECIPE_NAME, RETURN_ITEMS_ON_FAIL
from simplecraft.crafting.catalog import RecipeCatalog
from simplecraft.crafting.display import CraftingSessionDisplayMixin
from simplecraft.crafting.inventory_gateway import InventoryGateway, ItemLookup
from simplecraft.crafting.matcher import find_recipe
from simplecraft.crafting.recipe import Recipe
from simplecraft.items.item import Item
from simplecraft.utils.logger import Logger

class SessionState(Enum):
    EMPTY = "empty"
    SELECTING = "selecting"

class CraftingSession(CraftingSessionDisplayMixin):
    """
    The single crafting session of a running game.

    Ingredients are held "in escrow": each add_ingredient() takes one unit
    out of the inventory immediately. The escrow ends in one of three ways:
      - craft() matches a recipe: ingredients are consumed, outputs granted.
      - craft() matches nothing: ingredients are returned, or lost when
        return_items_on_fail is off.
      - begin() / cancel() / restart(): ingredients are returned.
    No operation raises; every outcome is reported through return values
    and last_crafted.
    """

    def __init__(self, inventory: InventoryGateway, item_registry: ItemLookup,
                 catalog: RecipeCatalog, return_items_on_fail: bool = RETURN_ITEMS_ON_FAIL):
        self.inventory = inventory
        self.item_registry = item_registry
        self.catalog = catalog
        self.return_items_on_fail = return_items_on_fail
        self._ingredients: List[Item] = []
        self.last_crafted: str = NO_RECIPE_NAME

    # --- Lifecycle ---

    def begin(self) -> None:
        """Start a new session: return anything escrowed and forget the last craft."""
        self._clear(return_items=True)
        self.last_crafted = NO_RECIPE_NAME
        Logger.debug("CraftingSession", "Session started.")

    def cancel(self) -> None:
        """End the session without crafting, returning every ingredient."""
        self._clear(return_items=True)
        self.last_crafted = NO_RECIPE_NAME
        Logger.debug("CraftingSession", "Session cancelled.")

    def restart(self) -> None:
        """Return every ingredient and start selecting again. Keeps last_crafted."""
        self._clear(return_items=True)
        Logger.debug("CraftingSession", "Session restarted.")

    def add_ingredient(self, item_id: int) -> bool:
        """
        Move one unit of an item from the inventory into the session.
        Items not currently in stock are ignored. Returns True if an item was added.
        """
        item = next((i for i in self.inventory.items() if i.item_id == item_id), None)
        if not item:
            Logger.debug("CraftingSession", f"Item {item_id} is not in stock; ignored.")
            return False

        self._ingredients.append(item)
        self.inventory.remove_item(item.item_id, 1)
        Logger.debug("CraftingSession", f"Added '{item.name}' (slot {len(self._ingredients)}).")
        return True

    def craft(self) -> bool:
        """
        Try to craft with the current ingredients, in the order they were added.
        Returns True when a recipe matched.
        """
        recipe = find_recipe(self.ingredient_names(), self.catalog)
        if recipe:
            self._grant(recipe)
            self.last_crafted = recipe.name
            # Ingredients are consumed
            self._clear(return_items=False)
            Logger.debug("CraftingSession", f"Crafted recipe {recipe.recipe_id} ('{recipe.name}').")
            return True

        self.last_crafted = NO_RECIPE_NAME
        Logger.debug("CraftingSession",
                     f"No recipe for {self.ingredient_names()}; "
                     f"{'returning' if self.return_items_on_fail else 'losing'} {self.ingredient_count()} ingredient(s).")
        self._clear(return_items=self.return_items_on_fail)
        return False

    # --- Queries ---

    @property
    def state(self) -> SessionState:
        return SessionState.SELECTING if self._ingredients else SessionState.EMPTY

    @property
    def ingredients(self) -> List[Item]:
        return list(self._ingredients)

    def ingredient_count(self) -> int:
        return len(self._ingredients)

    def ingredient_names(self) -> List[str]:
        return [item.name for item in self._ingredients]

    def ingredient_name_at(self, index: int) -> str:
        """Name of the ingredient in a slot, or "" if the slot is empty."""
        if 0 <= index < len(self._ingredients):
            return self._ingredients[index].name
        return ""

    def last_crafted_name(self) -> str:
        return self.last_crafted

    # --- Internals ---

    def _grant(self, recipe: Recipe) -> None:
        for crafted_name in recipe.crafts:
            item: Optional[Item] = self.item_registry.find_by_name(crafted_name)
            if not item:
                Logger.warning("CraftingSession",
                               f"Recipe {recipe.recipe_id} crafts unknown item '{crafted_name}'; skipped.")
                continue
            self.inventory.add_item(item, 1)

    def _clear(self, return_items: bool) -> None:
        if return_items:
            for item in self._ingredients:
                self.inventory.add_item(item, 1)
        self._ingredients = []
