# simplecraft/config/config_crafting.py
"""
Crafting session settings.
"""

# Return escrowed ingredients to the inventory when no recipe matches.
# When False the ingredients of a failed attempt are lost.
RETURN_ITEMS_ON_FAIL = True

# Shown as the last crafted recipe name when nothing has been crafted yet
NO_RECIPE_NAME = "(none)"

# Ingredient listing layout (three rows of three, like a message window)
INGREDIENT_DISPLAY_SLOTS = 9
INGREDIENT_DISPLAY_COLUMNS = 3


def parse_bool_param(value, default: bool = True) -> bool:
    """Parse a plugin-style string parameter ("true"/"false") into a bool."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if not text:
        return default
    if text in ("true", "yes", "on", "1"):
        return True
    if text in ("false", "no", "off", "0"):
        return False
    return default
