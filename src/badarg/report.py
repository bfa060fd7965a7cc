# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Failure reports and their single-line rendering.

A rendered report looks like::

    Bad arg: argName=port;type=int;expected=>0;actual=0

Fragments appear in a fixed order and are omitted when they do not apply:
``argName`` (or ``elementOf`` for violations inside a container), ``type``,
``expected`` and ``actual``. URL failures append the parser diagnostic after
``": "``.
"""

import math
from dataclasses import asdict
from decimal import Decimal
from typing import Any, Optional

from orjson import dumps as jd
from pydantic.dataclasses import dataclass as validated_dataclass

import badarg.deployment as d
from badarg.constraints import valid_name

ALL_NON_NULL: str = "all-non-null"
IS_URL: str = "is-url"
NON_BLANK: str = "non-blank"
NON_EMPTY: str = "non-empty"
NON_NEGATIVE: str = ">=0"
NON_NULL: str = "non-null"
POSITIVE: str = ">0"

ACTUAL_DECL: str = "actual="
ELEMENT_DECL: str = "elementOf="
EXPECTED_DECL: str = "expected="
NAME_DECL: str = "argName="
TYPE_DECL: str = "type="
SEP: str = ";"
DETAIL_SEP: str = ": "

CONTAINER_ACTUAL: str = "false"
STRING_TAG: str = "String"
FLOATING_TAGS: tuple[str, ...] = ("float", "double")


@validated_dataclass(frozen=True)
class FailureReport:
    expectation: str
    actual: str
    argument_name: Optional[str] = None
    element_of: Optional[str] = None
    value_type: Optional[str] = None
    detail: Optional[str] = None

    def render(self) -> str:
        fragments = list()

        if self.argument_name is not None:
            fragments.append(NAME_DECL + self.argument_name)
        elif self.element_of is not None:
            fragments.append(ELEMENT_DECL + self.element_of)

        if self.value_type is not None:
            fragments.append(TYPE_DECL + self.value_type)

        fragments.append(EXPECTED_DECL + self.expectation)
        fragments.append(ACTUAL_DECL + self.actual)

        message = d.MESSAGE_START + SEP.join(fragments)

        if self.detail is not None:
            message += DETAIL_SEP + self.detail

        return message

    def to_json(self) -> bytes:
        return jd(asdict(self))

    def __str__(self) -> str:
        return self.render()


def conjunction(*labels: str) -> str:
    return "&".join(labels)


def render_floating(x: float) -> str:
    """Shortest round-trip digits, plain in [1e-3, 1e7) and as d.dddEn elsewhere.

    Always carries a fractional part, so 0 renders as 0.0 and 1e-05 as 1.0E-5.
    """
    if math.isnan(x):
        return "NaN"

    sign = "-" if math.copysign(1.0, x) < 0 else ""
    magnitude = abs(x)

    if math.isinf(magnitude):
        return sign + "Infinity"
    elif magnitude == 0:
        return sign + "0.0"
    elif 1e-3 <= magnitude < 1e7:
        return sign + repr(magnitude)

    _, digit_tuple, exponent = Decimal(repr(magnitude)).as_tuple()
    digits = list(digit_tuple)
    exponent = int(exponent)

    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1

    fraction = "".join(map(str, digits[1:])) or "0"

    return f"{sign}{digits[0]}.{fraction}E{exponent + len(digits) - 1}"


def render_value(value: Any, value_type: Optional[str] = None) -> str:
    if value is None:
        return d.UNAVAILABLE_EQUIVALENT

    if value_type in FLOATING_TAGS and isinstance(value, (int, float)):
        return render_floating(float(value))

    return str(value)


def scalar(
    value: Any,
    expectation: str,
    value_type: Optional[str],
    name: Any = None,
    detail: Optional[str] = None,
) -> FailureReport:
    """Report about a single value: nullity, strings, numbers."""
    return FailureReport(
        expectation=expectation,
        actual=render_value(value, value_type),
        argument_name=name if valid_name(name) else None,
        value_type=value_type,
        detail=detail,
    )


def container(name: Any = None) -> FailureReport:
    """Report about a missing or empty container. Contents are never rendered."""
    return FailureReport(
        expectation=conjunction(NON_NULL, NON_EMPTY),
        actual=CONTAINER_ACTUAL,
        argument_name=name if valid_name(name) else None,
    )


def element(name: Any = None) -> FailureReport:
    """Report about a None element (or mapping key) inside a container."""
    return FailureReport(
        expectation=ALL_NON_NULL,
        actual=CONTAINER_ACTUAL,
        element_of=name if valid_name(name) else None,
    )
