# simplecraft/crafting/matcher.py
from typing import Iterable, Optional, Sequence

from simplecraft.crafting.recipe import Recipe

def find_recipe(ingredient_names: Sequence[str], catalog: Iterable[Recipe]) -> Optional[Recipe]:
    """
    Return the first recipe, in catalog order, whose ingredient sequence
    equals `ingredient_names` exactly (same names, same order, same length),
    or None when nothing matches.

    An empty selection never matches since no matchable recipe is empty.
    """
    selected = tuple(ingredient_names)
    if not selected:
        return None

    for recipe in catalog:
        if len(recipe.ingredients) != len(selected):
            continue
        if recipe.ingredients == selected:
            return recipe
    return None
