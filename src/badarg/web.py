# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

import string
from typing import Any, Optional, cast
from urllib.parse import SplitResult, urlsplit

import badarg.deployment as d
import badarg.report as r
from badarg.constraints import ensure, fail, fan_out
from badarg.strings import not_blank

# RFC 3986 unreserved and reserved characters
URI_CHARS = set(
    string.ascii_letters + string.digits + "-._~" + ":/?#[]@" + "!$&'()*+,;="
)
HEX_CHARS = set(string.hexdigits)


def _scan(value: str) -> None:
    for i, ch in enumerate(value):
        if ch == "%":
            escape = value[i + 1 : i + 3]

            if len(escape) != 2 or not all(c in HEX_CHARS for c in escape):
                raise ValueError(f"Malformed escape pair at index {i}: {value}")
        elif ch in URI_CHARS:
            continue
        elif ord(ch) > 127 and ch.isprintable() and not ch.isspace():
            continue
        else:
            raise ValueError(f"Illegal character {ch!r} at index {i}: {value}")

    first_hash = value.find("#")

    if first_hash != -1 and "#" in value[first_hash + 1 :]:
        i = value.index("#", first_hash + 1)

        raise ValueError(f"Illegal character '#' in fragment at index {i}: {value}")


def parse_uri_reference(value: str) -> SplitResult:
    """Parse an absolute or relative URI reference, rejecting malformed input.

    urlsplit alone accepts nearly anything, so the input is scanned for
    characters RFC 3986 does not allow and the split result is checked for
    structural problems. Raises ValueError with a diagnostic on failure.
    """
    _scan(value)

    parts = urlsplit(value)  # raises ValueError on unbalanced IPv6 brackets

    if "[" in parts.path or "]" in parts.path:
        raise ValueError(f"Square brackets in path: {value}")

    if parts.scheme:
        if not parts.scheme[0].isalpha():
            raise ValueError(f"Expected scheme name at index 0: {value}")

        ssp = value[len(parts.scheme) + 1 :]

        if not ssp:
            raise ValueError(
                f"Expected scheme-specific part at index {len(parts.scheme) + 1}: {value}"
            )

        if ssp.startswith("//") and not parts.netloc and not parts.path:
            raise ValueError(
                f"Expected authority at index {len(parts.scheme) + 3}: {value}"
            )
    elif ":" in parts.path.split("/", 1)[0]:
        raise ValueError(f"Expected scheme name at index 0: {value}")

    return parts


def is_valid_url(value: Optional[str], name: Optional[str] = None) -> SplitResult:
    not_blank(value, name)

    try:
        return parse_uri_reference(cast(str, value))
    except ValueError as exc:
        fail(
            r.scalar(
                value,
                r.conjunction(r.NON_NULL, r.NON_BLANK, r.IS_URL),
                r.STRING_TAG,
                name,
                detail=str(exc),
            )
        )


def http_status_label() -> str:
    return f"'in [{d.HTTP_STATUS_MIN};{d.HTTP_STATUS_MAX + 1})'"


def is_http_status(value: Any, name: Optional[str] = None) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")

    ensure(
        d.HTTP_STATUS_MIN <= value <= d.HTTP_STATUS_MAX,
        lambda: r.scalar(value, http_status_label(), "int", name),
    )


def are_http_statuses(first: Any, *rest: Any) -> None:
    fan_out(is_http_status, first, rest)
