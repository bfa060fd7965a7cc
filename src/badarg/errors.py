# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from badarg.report import FailureReport


class InvalidArgumentError(ValueError):
    """Raised when an argument violates a precondition.

    The message is the rendered report; the report itself stays available as
    ``.report`` for callers that want the individual fields.
    """

    def __init__(self, report: "FailureReport") -> None:
        self.report = report
        super().__init__(report.render())
