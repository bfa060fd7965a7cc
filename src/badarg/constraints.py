# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
This file intends to provide (1) a replacement for raw `assert`s that raises
InvalidArgumentError with a rendered report and (2) the shared plumbing every check uses.
"""

import unicodedata
from typing import TYPE_CHECKING, Any, Callable, Iterable, NoReturn, TypeVar, Union

import badarg.deployment as d
from badarg.errors import InvalidArgumentError

if TYPE_CHECKING:
    from badarg.report import FailureReport

T = TypeVar("T")


# Unicode space separators except the no-break ones, plus the ASCII
# whitespace and separator controls. Narrower than str.isspace().
CONTROL_WHITESPACE = set("\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f")
NO_BREAK_SPACES = set("\u00a0\u2007\u202f")
SEPARATOR_CATEGORIES = ("Zs", "Zl", "Zp")


def is_whitespace(ch: str) -> bool:
    if ch in CONTROL_WHITESPACE:
        return True

    return (
        ch not in NO_BREAK_SPACES
        and unicodedata.category(ch) in SEPARATOR_CATEGORIES
    )


def is_blank(x: str) -> bool:
    return all(is_whitespace(ch) for ch in x)


def valid_name(x: Any) -> bool:
    if not isinstance(x, str):
        return False

    return not is_blank(x)


def fail(report: "FailureReport") -> NoReturn:
    if d.TRACE:
        d.LOGGER.debug(report.render())

    raise InvalidArgumentError(report)


def ensure(
    condition: Any,
    report: Union["FailureReport", Callable[[], "FailureReport"]],
) -> None:
    if not condition:
        # report may be a factory
        if callable(report):
            report = report()

        fail(report)


def fan_out(check: Callable[[T], Any], first: T, rest: Iterable[T]) -> None:
    check(first)

    for item in rest:
        check(item)
