# simplecraft/crafting/catalog.py
import json
import os
from typing import Any, Dict, Iterator, List, Optional, Tuple

from simplecraft.crafting.recipe import Recipe
from simplecraft.utils.logger import Logger

class RecipeCatalog:
    """
    The recipe list, loaded once at startup and never modified afterwards.

    The data file is a JSON array with a null placeholder at index 0:

        [
          null,
          {"id": 1, "name": "a Striker", "crafts": ["Striker"], "ingredients": ["Flint", "Iron"]}
        ]

    Iteration order is catalog order, which is also the matching order.
    """

    def __init__(self, recipes: Optional[List[Recipe]] = None):
        self._recipes: List[Recipe] = []
        self._by_id: Dict[int, Recipe] = {}
        self._index: Dict[Tuple[str, ...], Recipe] = {}
        for recipe in recipes or []:
            self._add(recipe)

    def _add(self, recipe: Recipe) -> bool:
        if recipe.recipe_id in self._by_id:
            Logger.warning("RecipeCatalog", f"Duplicate recipe id {recipe.recipe_id} ('{recipe.name}'); skipped.")
            return False

        if not recipe.matchable:
            Logger.warning("RecipeCatalog", f"Recipe {recipe.recipe_id} ('{recipe.name}') has no ingredients and can never be crafted.")
        elif recipe.ingredients in self._index:
            first = self._index[recipe.ingredients]
            Logger.warning("RecipeCatalog",
                           f"Recipe {recipe.recipe_id} ('{recipe.name}') has the same ingredients as "
                           f"recipe {first.recipe_id} ('{first.name}'); the earlier recipe always wins.")
        else:
            self._index[recipe.ingredients] = recipe

        self._recipes.append(recipe)
        self._by_id[recipe.recipe_id] = recipe
        return True

    @classmethod
    def from_data(cls, records: List[Any]) -> 'RecipeCatalog':
        """Build a catalog from the decoded JSON array. Malformed records are skipped."""
        catalog = cls()
        for position, record in enumerate(records):
            if position == 0:
                if record is not None:
                    Logger.warning("RecipeCatalog", "Entry 0 is reserved and was ignored.")
                continue
            if not isinstance(record, dict):
                Logger.warning("RecipeCatalog", f"Skipping recipe entry {position}: not an object.")
                continue

            recipe, reason = Recipe.from_dict(record)
            if not recipe:
                Logger.warning("RecipeCatalog", f"Skipping recipe entry {position}: {reason}.")
                continue
            if recipe.recipe_id != position:
                Logger.warning("RecipeCatalog",
                               f"Recipe '{recipe.name}' has id {recipe.recipe_id} but sits at position {position}.")
            catalog._add(recipe)

        Logger.info("RecipeCatalog", f"Loaded {len(catalog)} recipes.")
        return catalog

    @classmethod
    def load(cls, file_path: str) -> 'RecipeCatalog':
        """Load the catalog from a JSON file. A missing or unreadable file gives an empty catalog."""
        if not os.path.exists(file_path):
            Logger.warning("RecipeCatalog", f"Recipe file not found: {file_path}")
            return cls()
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            Logger.error("RecipeCatalog", f"Error loading recipes from {file_path}: {e}")
            return cls()
        if not isinstance(data, list):
            Logger.error("RecipeCatalog", f"Recipe file {file_path} must contain a JSON array.")
            return cls()
        return cls.from_data(data)

    def get(self, recipe_id: int) -> Optional[Recipe]:
        return self._by_id.get(recipe_id)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)
