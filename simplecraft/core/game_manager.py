# simplecraft/core/game_manager.py
import json
import os
from typing import Iterable, Optional, TextIO

from simplecraft.commands import CommandProcessor
from simplecraft.config import (
    DATA_DIR, ITEM_FILE, RECIPE_FILE, RETURN_ITEMS_ON_FAIL, STARTING_INVENTORY_FILE
)
from simplecraft.crafting import CraftingSession, RecipeCatalog
from simplecraft.items import ItemRegistry
from simplecraft.items.inventory import Inventory
from simplecraft.core.game_state import GameSwitches, GameVariables
from simplecraft.utils.logger import Logger
from simplecraft.utils.text import remove_format_codes

class GameManager:
    """
    Owns the one crafting session and everything it works against.
    Commands are handled one at a time, in the order they arrive.
    """

    def __init__(self, item_registry: ItemRegistry, catalog: RecipeCatalog,
                 inventory: Optional[Inventory] = None, return_items_on_fail: Optional[bool] = None):
        if return_items_on_fail is None:
            return_items_on_fail = RETURN_ITEMS_ON_FAIL

        self.item_registry = item_registry
        self.catalog = catalog
        self.inventory = inventory if inventory is not None else Inventory()
        self.variables = GameVariables()
        self.switches = GameSwitches()
        self.command_processor = CommandProcessor()
        # Created once; begin/cancel/restart reset it but it is never replaced
        self.crafting_session = CraftingSession(
            self.inventory, self.item_registry, self.catalog, return_items_on_fail
        )

    @classmethod
    def from_data_dir(cls, data_dir: str = DATA_DIR,
                      return_items_on_fail: Optional[bool] = None) -> 'GameManager':
        """Load items, recipes and the starting inventory from a data directory."""
        registry = ItemRegistry.load(os.path.join(data_dir, ITEM_FILE))
        catalog = RecipeCatalog.load(os.path.join(data_dir, RECIPE_FILE))
        inventory = cls._load_starting_inventory(os.path.join(data_dir, STARTING_INVENTORY_FILE), registry)
        Logger.info("GameManager", f"Data loaded from {data_dir}: {len(registry)} items, {len(catalog)} recipes.")
        return cls(registry, catalog, inventory, return_items_on_fail)

    @staticmethod
    def _load_starting_inventory(path: str, registry: ItemRegistry) -> Inventory:
        if not os.path.exists(path):
            Logger.info("GameManager", f"No starting inventory at {path}; starting empty.")
            return Inventory()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            Logger.error("GameManager", f"Error loading starting inventory: {e}")
            return Inventory()
        if not isinstance(data, dict):
            Logger.error("GameManager", "Starting inventory must be a JSON object.")
            return Inventory()
        return Inventory.from_dict(data, registry)

    def process_command(self, text: str) -> str:
        Logger.debug("GameManager", f"> {text.strip()}")
        return self.command_processor.process_input(text, self)

    def run(self, lines: Iterable[str], out: TextIO, strip_format: bool = True) -> int:
        """
        Execute a stream of commands (one per line), writing each response.
        Blank lines and lines starting with '#' are skipped. Returns the number
        of commands executed.
        """
        executed = 0
        for line in lines:
            text = line.strip()
            if not text or text.startswith("#"):
                continue
            response = self.process_command(text)
            executed += 1
            if response:
                print(remove_format_codes(response) if strip_format else response, file=out)
        return executed
