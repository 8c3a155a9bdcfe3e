"""Ancestor linearization used for class data lookup.

Depth-first, left to right over __bases__, first occurrence wins. This is
not the C3 MRO: for diamonds the left branch is exhausted before the right
one is visited.
"""

from __future__ import annotations

from typing import Iterator


def self_and_super_path(cls: type) -> tuple[type, ...]:
    """Return cls followed by its ancestors in lookup order.

    `object` is left out. It never holds class data, and a depth-first walk
    would otherwise reach it before later bases.

    Not cached: reload tooling may reassign __bases__ at runtime.
    """
    seen: dict[type, None] = {}
    for klass in _walk(cls):
        if klass is not object and klass not in seen:
            seen[klass] = None
    return tuple(seen)


def _walk(cls: type) -> Iterator[type]:
    stack = [cls]
    while stack:
        klass = stack.pop()
        yield klass
        stack.extend(reversed(klass.__bases__))
