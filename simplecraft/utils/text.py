# simplecraft/utils/text.py
from typing import Iterable, List

from simplecraft.config import ALL_FORMAT_CODES

def remove_format_codes(text: str, codes: Iterable[str] = ALL_FORMAT_CODES) -> str:
    """Strip [[COLOR]] codes so a response can go to a plain terminal."""
    if not text:
        return ""
    result = text
    for code in codes:
        result = result.replace(code, "")
    result = result.replace('\r\n', '\n').replace('\r', '\n')
    while '\n\n\n' in result:
        result = result.replace('\n\n\n', '\n\n')
    return result

def split_columns(cells: List[str], columns: int, spacing: int = 3) -> List[str]:
    """Lay out cells left-to-right in rows of `columns`, padding each to the widest cell."""
    if columns <= 0 or not cells:
        return []
    width = max(len(c) for c in cells)
    rows = []
    for start in range(0, len(cells), columns):
        row = cells[start:start + columns]
        rows.append((" " * spacing).join(c.ljust(width) for c in row).rstrip())
    return rows
