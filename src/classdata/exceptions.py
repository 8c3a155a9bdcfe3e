"""Exceptions raised by classdata."""

from __future__ import annotations


def _describe(receiver: object) -> str:
    # Never repr() the receiver: a user __repr__ may itself hit the fallback.
    if isinstance(receiver, type):
        return f"class {receiver.__module__}.{receiver.__qualname__}"
    return f"{type(receiver).__qualname__} object"


class ClassDataError(Exception):
    """Base class for classdata errors."""


class NoSuchCapability(ClassDataError, AttributeError):
    """No handler in the fallback chain recognized the requested name.

    Subclasses AttributeError so hasattr() and getattr(obj, name, default)
    behave as they would for any other missing attribute.
    """

    def __init__(self, receiver: object, name: str) -> None:
        super().__init__(f"{_describe(receiver)} has no attribute or class data {name!r}")
        self.receiver = receiver
        self.name = name


class InvalidAttributeName(ClassDataError, ValueError):
    """The attribute name cannot be used as a class data slot."""

    def __init__(self, attribute: object, reason: str) -> None:
        super().__init__(f"invalid class data name {attribute!r}: {reason}")
        self.attribute = attribute
