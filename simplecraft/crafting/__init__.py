# simplecraft/crafting/__init__.py
"""
Crafting Package.
Recipe catalog, ordered-sequence recipe matching, and the crafting session.
"""
from .recipe import Recipe
from .catalog import RecipeCatalog
from .matcher import find_recipe
from .session import CraftingSession, SessionState
