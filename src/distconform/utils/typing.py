from __future__ import annotations

from types import UnionType
from typing import Annotated, Literal, Union, get_args, get_origin

__all__ = ["get_literal_vals"]


def get_literal_vals(alias) -> frozenset[str]:
    """
    Collect the values of a ``Literal`` alias as strings, looking through
    ``Annotated`` wrappers and unions, e.g. to build click choices from
    ``SamplingPath``. Union members that are not literals contribute their
    string form.

    :param alias: The type alias to resolve
    :return: The string form of every value found
    """
    values: set[str] = set()
    pending = [alias]
    while pending:
        current = pending.pop()
        origin = get_origin(current)
        if origin is Literal:
            values.update(str(value) for value in get_args(current))
        elif origin is Annotated:
            pending.append(get_args(current)[0])
        elif origin in (Union, UnionType):
            pending.extend(get_args(current))
        else:
            values.add(str(current))

    return frozenset(values)
