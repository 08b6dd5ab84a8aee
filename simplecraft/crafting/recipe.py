# simplecraft/crafting/recipe.py
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

@dataclass(frozen=True)
class Recipe:
    recipe_id: int
    name: str # Display name of the result, e.g. "a Striker"
    crafts: Tuple[str, ...] # Item names produced, duplicates allowed
    ingredients: Tuple[str, ...] # Item names required, in the exact order they must be added

    @property
    def matchable(self) -> bool:
        """A recipe with no ingredients can never be matched."""
        return len(self.ingredients) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.recipe_id,
            "name": self.name,
            "crafts": list(self.crafts),
            "ingredients": list(self.ingredients),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Tuple[Optional['Recipe'], str]:
        """
        Build a recipe from a catalog record.
        Returns (recipe, "") or (None, reason) when the record is malformed.
        """
        recipe_id = data.get("id")
        if not isinstance(recipe_id, int) or isinstance(recipe_id, bool) or recipe_id <= 0:
            return None, "'id' must be a positive integer"

        name = data.get("name")
        if not isinstance(name, str):
            return None, "'name' must be a string"

        for key in ("crafts", "ingredients"):
            value = data.get(key)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                return None, f"'{key}' must be a list of item names"

        return cls(
            recipe_id=recipe_id,
            name=name,
            crafts=tuple(data["crafts"]),
            ingredients=tuple(data["ingredients"]),
        ), ""
