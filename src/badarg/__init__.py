# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Precondition checks that fail fast with a descriptive InvalidArgumentError."""

from badarg.constraints import ensure, valid_name
from badarg.containers import deep_not_empty, not_empty
from badarg.errors import InvalidArgumentError
from badarg.nullity import neither_null, not_null
from badarg.numerics import (
    NumericKind,
    are_non_negative,
    are_positive,
    is_non_negative,
    is_positive,
)
from badarg.report import FailureReport
from badarg.strings import (
    neither_blank,
    neither_nullable_not_blank,
    not_blank,
    nullable_not_blank,
)
from badarg.web import are_http_statuses, is_http_status, is_valid_url

__version_info__ = 0, 1, 0
__version__ = ".".join(map(str, __version_info__))
__author__ = "badarg contributors"

__all__ = [
    "FailureReport",
    "InvalidArgumentError",
    "NumericKind",
    "are_http_statuses",
    "are_non_negative",
    "are_positive",
    "deep_not_empty",
    "ensure",
    "is_http_status",
    "is_non_negative",
    "is_positive",
    "is_valid_url",
    "neither_blank",
    "neither_null",
    "neither_nullable_not_blank",
    "not_blank",
    "not_empty",
    "not_null",
    "nullable_not_blank",
    "valid_name",
]
