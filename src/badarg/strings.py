# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

from typing import Any, Optional

import badarg.report as r
from badarg.constraints import ensure, fan_out, is_blank


def _expect_str(value: Any) -> None:
    if value is not None and not isinstance(value, str):
        raise TypeError(f"Expected str or None, got {type(value).__name__}")


def not_blank(value: Optional[str], name: Optional[str] = None) -> None:
    """Fail on None, the empty string and whitespace-only strings."""
    _expect_str(value)

    ensure(
        value is not None and not is_blank(value),
        lambda: r.scalar(
            value, r.conjunction(r.NON_NULL, r.NON_BLANK), r.STRING_TAG, name
        ),
    )


def nullable_not_blank(value: Optional[str], name: Optional[str] = None) -> None:
    """Like not_blank, but None is accepted."""
    if value is None:
        return

    _expect_str(value)

    ensure(
        not is_blank(value),
        lambda: r.scalar(value, r.NON_BLANK, r.STRING_TAG, name),
    )


def neither_blank(first: Optional[str], *rest: Optional[str]) -> None:
    fan_out(not_blank, first, rest)


def neither_nullable_not_blank(first: Optional[str], *rest: Optional[str]) -> None:
    fan_out(nullable_not_blank, first, rest)
