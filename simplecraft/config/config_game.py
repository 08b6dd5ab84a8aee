# simplecraft/config/config_game.py
"""
Configuration for file paths, logging and the command host.
"""
import os

# --- Directories and Files ---
# config_game.py is in simplecraft/config/, so we go up two levels to get to root.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_DIR = os.path.join(BASE_DIR, "data")
RECIPE_FILE = "CraftingRecipes.json"
ITEM_FILE = "Items.json"
STARTING_INVENTORY_FILE = "StartingInventory.json"

# --- Logging ---
# One of DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_LEVEL = "WARNING"

# --- Command Host ---
# Optional leading word accepted before crafting commands ("SimpleCrafting add 3")
PLUGIN_COMMAND_NAME = "simplecrafting"
HELP_MAX_COMMANDS_PER_CATEGORY = 8
