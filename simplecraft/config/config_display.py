# simplecraft/config/config_display.py
"""
Format codes embedded in command responses. Hosts that cannot render
color strip them (see simplecraft.utils.text).
"""

FORMAT_PURPLE = "[[PURPLE]]"
FORMAT_RED = "[[RED]]"
FORMAT_ORANGE = "[[ORANGE]]"
FORMAT_YELLOW = "[[YELLOW]]"
FORMAT_GREEN = "[[GREEN]]"
FORMAT_GRAY = "[[GRAY]]"
FORMAT_CYAN = "[[CYAN]]"
FORMAT_WHITE = "[[WHITE]]"
FORMAT_RESET = "[[/]]"

FORMAT_ERROR = FORMAT_RED
FORMAT_TITLE = FORMAT_YELLOW
FORMAT_HIGHLIGHT = FORMAT_GREEN
FORMAT_SUCCESS = FORMAT_GREEN
FORMAT_CATEGORY = FORMAT_CYAN

ALL_FORMAT_CODES = (
    FORMAT_PURPLE, FORMAT_RED, FORMAT_ORANGE, FORMAT_YELLOW, FORMAT_GREEN,
    FORMAT_GRAY, FORMAT_CYAN, FORMAT_WHITE, FORMAT_RESET,
)
