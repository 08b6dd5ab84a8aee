# simplecraft/core/game_state.py
from typing import Dict, Union

class GameVariables:
    """Numbered integer slots the command host writes results into (e.g. `count`)."""

    def __init__(self):
        self._data: Dict[int, int] = {}

    def value(self, var_id: int) -> int:
        return self._data.get(var_id, 0)

    def set_value(self, var_id: int, value: Union[int, bool]) -> None:
        self._data[var_id] = int(value)

class GameSwitches:
    """Numbered on/off slots (e.g. the result of `craft`)."""

    def __init__(self):
        self._data: Dict[int, bool] = {}

    def value(self, switch_id: int) -> bool:
        return self._data.get(switch_id, False)

    def set_value(self, switch_id: int, value: bool) -> None:
        self._data[switch_id] = bool(value)
