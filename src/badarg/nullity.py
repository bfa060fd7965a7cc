# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

from typing import Any, Optional

import badarg.report as r
from badarg.constraints import ensure, fan_out


def not_null(value: Any, name: Optional[str] = None) -> None:
    ensure(value is not None, lambda: r.scalar(value, r.NON_NULL, None, name))


def neither_null(first: Any, *rest: Any) -> None:
    fan_out(not_null, first, rest)
