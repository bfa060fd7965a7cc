# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Sign checks shared by every numeric width.

The width only matters for the ``type=`` tag of a report. It is inferred from
the value unless given explicitly as ``kind``.
"""

from decimal import Decimal
from functools import partial
from numbers import Real
from typing import Any, Literal, Optional, TypeAlias, get_args

import badarg.report as r
from badarg.constraints import ensure, fan_out

NumericKind: TypeAlias = Literal["int", "long", "short", "float", "double"]
KINDS: tuple[str, ...] = get_args(NumericKind)


def type_tag(value: Any, kind: Optional[NumericKind] = None) -> str:
    match value:
        case None:
            raise TypeError("Expected a real number, got None")
        case bool():
            raise TypeError("Expected a real number, got bool")
        case _ if not isinstance(value, (Real, Decimal)):
            raise TypeError(f"Expected a real number, got {type(value).__name__}")

    if kind is not None:
        if kind not in KINDS:
            raise ValueError(f"Unknown numeric kind: {kind!r}")

        return kind

    match value:
        case int():
            return "int"
        case float():
            return "double"  # Python floats are double precision
        case _:
            return type(value).__name__


def is_positive(
    value: Any,
    name: Optional[str] = None,
    kind: Optional[NumericKind] = None,
) -> None:
    """Fail when value < 1.

    Zero is not positive here, and neither is anything between 0 and 1. Values
    that do not compare (NaN) pass.
    """
    tag = type_tag(value, kind)

    ensure(not value < 1, lambda: r.scalar(value, r.POSITIVE, tag, name))


def is_non_negative(
    value: Any,
    name: Optional[str] = None,
    kind: Optional[NumericKind] = None,
) -> None:
    tag = type_tag(value, kind)

    ensure(not value < 0, lambda: r.scalar(value, r.NON_NEGATIVE, tag, name))


def are_positive(first: Any, *rest: Any, kind: Optional[NumericKind] = None) -> None:
    fan_out(partial(is_positive, kind=kind), first, rest)


def are_non_negative(
    first: Any, *rest: Any, kind: Optional[NumericKind] = None
) -> None:
    fan_out(partial(is_non_negative, kind=kind), first, rest)
