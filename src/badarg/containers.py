# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Emptiness checks for sized collections, mappings and bare iterables.

Bare iterables (generators, iterators, anything without ``len()``) are probed
by pulling their first element. A deep check then resumes from that element,
so every element is seen exactly once even for single-pass iterators.
"""

from collections.abc import Iterable, Mapping, Sized
from itertools import chain
from typing import Any, Optional

import badarg.report as r
from badarg.constraints import ensure, fail


def probe(container: Any) -> tuple[bool, Iterable[Any]]:
    """Return (is_empty, elements). For mappings, the elements are the keys."""
    match container:
        case None:
            return True, ()
        case Mapping():
            return len(container) == 0, container.keys()
        case Sized() if isinstance(container, Iterable):
            return len(container) == 0, container
        case Iterable():
            it = iter(container)

            try:
                first = next(it)
            except StopIteration:
                return True, ()

            return False, chain((first,), it)
        case _:
            tname = type(container).__name__

            raise TypeError(f"Expected a collection, mapping or iterable, got {tname}")


def not_empty(container: Any, name: Optional[str] = None) -> None:
    empty, _ = probe(container)

    ensure(not empty, lambda: r.container(name))


def deep_not_empty(container: Any, name: Optional[str] = None) -> None:
    """Like not_empty, and additionally no element may be None.

    For mappings only the keys are inspected; None values are fine.
    """
    empty, elements = probe(container)

    ensure(not empty, lambda: r.container(name))

    for element in elements:
        if element is None:
            fail(r.element(name))
