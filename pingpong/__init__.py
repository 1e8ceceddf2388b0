"""
Ping pong against a computer opponent, simulated in plain Python and drawn with pygame.
"""
from .settings import DEFAULT_SETTINGS, Action, PlayerSlot, Settings
from .table import Table

__all__ = [
    "DEFAULT_SETTINGS",
    "Action",
    "PlayerSlot",
    "Settings",
    "Table",
]
