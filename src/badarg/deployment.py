# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

import logging
import os
from typing import Any

HTTP_STATUS_MAX: int = 599
HTTP_STATUS_MIN: int = 100
LOGGER: Any = logging.getLogger("badarg")
MESSAGE_START: str = "Bad arg: "
TRACE: bool = os.getenv("BADARG_TRACE", "").strip().lower() in ("1", "true", "yes")
UNAVAILABLE_EQUIVALENT: str = "null"

LOGGER.addHandler(logging.NullHandler())
