# simplecraft/crafting/display.py
import re
from typing import TYPE_CHECKING, cast

from simplecraft.config import (
    FORMAT_CATEGORY, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_TITLE,
    INGREDIENT_DISPLAY_COLUMNS, INGREDIENT_DISPLAY_SLOTS
)
from simplecraft.utils.text import split_columns

if TYPE_CHECKING:
    from simplecraft.crafting.session import CraftingSession

# Message codes. "\" may already have been turned into ESC by the host's own escape pass.
_ITEM_CODE_RE = re.compile(r"[\\\x1b]CItem\[([0-9]+)\]", re.IGNORECASE)
_LAST_CODE_RE = re.compile(r"[\\\x1b]CLast", re.IGNORECASE)
_COUNT_CODE_RE = re.compile(r"[\\\x1b]CCount", re.IGNORECASE)

class CraftingSessionDisplayMixin:
    """
    Read-only text views of a crafting session.
    Everything here goes through the session's query methods and has no side effects.
    """

    def list_ingredients(self) -> str:
        session = cast('CraftingSession', self)

        count = session.ingredient_count()
        out = [f"{FORMAT_TITLE}{count} Ingredients Selected:{FORMAT_RESET}"]

        shown = [session.ingredient_name_at(i) for i in range(min(count, INGREDIENT_DISPLAY_SLOTS))]
        if shown:
            out.extend(f"  {row}" for row in split_columns(shown, INGREDIENT_DISPLAY_COLUMNS))
            if count > INGREDIENT_DISPLAY_SLOTS:
                out.append(f"  {FORMAT_CATEGORY}...and {count - INGREDIENT_DISPLAY_SLOTS} more{FORMAT_RESET}")
        else:
            out.append(f"  {FORMAT_CATEGORY}(nothing yet){FORMAT_RESET}")

        out.append(f"{FORMAT_CATEGORY}Last crafted:{FORMAT_RESET} {FORMAT_HIGHLIGHT}{session.last_crafted_name()}{FORMAT_RESET}")
        return "\n".join(out)

    def expand_text_codes(self, text: str) -> str:
        r"""
        Expand crafting codes in message text:
          \CItem[n]  name of the nth selected ingredient ("" if none)
          \CCount    number of selected ingredients
          \CLast     name of the last successfully crafted recipe
        """
        session = cast('CraftingSession', self)
        if not text:
            return ""

        text = _ITEM_CODE_RE.sub(lambda m: session.ingredient_name_at(int(m.group(1))), text)
        text = _LAST_CODE_RE.sub(lambda m: session.last_crafted_name(), text)
        text = _COUNT_CODE_RE.sub(lambda m: str(session.ingredient_count()), text)
        return text
