"""Helpers shared by the click commands."""

from __future__ import annotations

import os
from collections.abc import Iterable

__all__ = ["list_set_env", "parse_list"]


def list_set_env(prefix: str = "DISTCONFORM__") -> list[str]:
    """
    :param prefix: Environment variable prefix to match
    :return: Names of the environment variables starting with the prefix
    """
    return sorted(name for name in os.environ if name.startswith(prefix))


def parse_list(ctx, param, value) -> list[str] | None:
    """
    Click callback flattening an option into a list of names.

    Accepts a single value, a comma separated string, or the tuple click passes
    for ``multiple=True`` options whose items may themselves be comma separated.
    Blank entries are dropped.

    :param ctx: Click context, unused
    :param param: Click parameter, unused
    :param value: The raw option value
    :return: The names in order, or None if there are none
    """
    if value is None:
        return None

    items: Iterable = value if isinstance(value, list | tuple) else [value]
    names = [
        part.strip()
        for item in items
        if item is not None
        for part in str(item).split(",")
        if part.strip()
    ]

    return names or None
