from .cli import list_set_env, parse_list
from .console import (
    Colors,
    Console,
    ConsoleUpdateStep,
    StatusIcons,
    StatusLevel,
    StatusStyles,
)
from .pydantic_utils import StandardBaseModel
from .typing import get_literal_vals

__all__ = [
    "Colors",
    "Console",
    "ConsoleUpdateStep",
    "StandardBaseModel",
    "StatusIcons",
    "StatusLevel",
    "StatusStyles",
    "get_literal_vals",
    "list_set_env",
    "parse_list",
]
