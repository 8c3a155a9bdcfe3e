"""Inheritable, overridable class data that survives reloads.

Usage:
    class Stuff(ClassData):
        pass

    Stuff.mk_classdata("DataFile")
    Stuff.DataFile("/etc/stuff/data")

    # ... importlib.reload() the module defining Stuff

    Stuff.DataFile()  # "/etc/stuff/data"

Values live in a ClassDataStore keyed by class identifier, never in the class
body. Accessors are installed as classmethods and are disposable: a reload
(or anything else) may drop them, and the first lookup that misses puts them
back via ReloadableMeta.__getattr__ / ClassData.__getattr__.

Every class that keeps state should keep all of it this way. A plain class
attribute set after definition is still lost on reload.
"""

from __future__ import annotations

import keyword
import logging

from classdata import _anchor
from classdata.exceptions import InvalidAttributeName, NoSuchCapability
from classdata.lineage import self_and_super_path
from classdata.store import NOTHING, store_for

logger = logging.getLogger("classdata.reloadable")

_UNSET = object()
_ALIAS_PREFIX = "_"
_ALIAS_SUFFIX = "_accessor"


def set_debug(enabled: bool) -> None:
    """Enable or disable tracing of accessor creation and fallback lookups.

    Traces go to the "classdata.reloadable" logger at DEBUG level. A single
    class tree can be traced instead by setting `_classdata_debug = True`
    on its root.
    """
    _anchor.debug = bool(enabled)


def is_debug() -> bool:
    return _anchor.debug


def _tracing(cls: type) -> bool:
    if _anchor.debug:
        return True
    # __dict__ scan, not getattr: a miss would re-enter the fallback hook.
    for klass in cls.__mro__:
        if "_classdata_debug" in klass.__dict__:
            return bool(klass.__dict__["_classdata_debug"])
    return False


def alias_name(attribute: str) -> str:
    return f"{_ALIAS_PREFIX}{attribute}{_ALIAS_SUFFIX}"


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _candidates(name: str) -> list[str]:
    """Class data attributes a requested name may refer to, most specific first."""
    if _is_dunder(name):
        return []
    names = [name]
    if (
        name.startswith(_ALIAS_PREFIX)
        and name.endswith(_ALIAS_SUFFIX)
        and len(name) > len(_ALIAS_PREFIX) + len(_ALIAS_SUFFIX)
    ):
        names.append(name[len(_ALIAS_PREFIX):-len(_ALIAS_SUFFIX)])
    return names


def _check_name(attribute: object) -> None:
    if not isinstance(attribute, str):
        raise InvalidAttributeName(attribute, "must be a string")
    if not attribute.isidentifier():
        raise InvalidAttributeName(attribute, "not a Python identifier")
    if keyword.iskeyword(attribute):
        raise InvalidAttributeName(attribute, "is a keyword")
    if _is_dunder(attribute):
        raise InvalidAttributeName(attribute, "dunder names are reserved")


def is_accessor(obj: object) -> bool:
    return isinstance(obj, classmethod) and hasattr(obj.__func__, "__classdata_attribute__")


def _class_entry(cls: type, name: str) -> object:
    """What normal lookup of name on cls would find, without running any hook."""
    for klass in cls.__mro__:
        if name in klass.__dict__:
            return klass.__dict__[name]
    return _UNSET


def _next_handler(receiver: object, after: type, hook: str):
    """The next `hook` past `after` in the receiver type's class data lineage.

    Walks the same depth-first order used for value lookup, so forwarding
    and resolution never disagree on a diamond.
    """
    passed = False
    for klass in self_and_super_path(type(receiver)):
        if passed and hook in klass.__dict__:
            return klass.__dict__[hook].__get__(receiver, type(receiver))
        if klass is after:
            passed = True
    return None


def _install_accessor(client: type, attribute: str) -> classmethod:
    """Put a fresh accessor and its alias on client. Stateless: all data is in the store."""
    if _tracing(client):
        logger.debug("making %r accessor in %s", attribute, client.__qualname__)

    def accessor(cls, value=_UNSET):
        store = store_for(cls)
        if value is _UNSET:
            return store.get(cls, attribute)
        # Always the caller's own slot, so a subclass override never
        # mutates the ancestor it inherited from.
        return store.set(cls, attribute, value)

    accessor.__name__ = attribute
    accessor.__qualname__ = f"{client.__qualname__}.{attribute}"
    accessor.__doc__ = f"Get, or set and return, the {attribute!r} class data."
    accessor.__classdata_attribute__ = attribute
    method = classmethod(accessor)

    for name in (attribute, alias_name(attribute)):
        if name in client.__dict__ and not is_accessor(client.__dict__[name]):
            logger.warning(
                "class data accessor replaces existing attribute %s.%s",
                client.__qualname__, name,
            )
        setattr(client, name, method)
    return method


def declare(cls: type, attribute: str, value: object = NOTHING) -> object:
    """Create a class data slot on cls, optionally setting a value into it.

    If a value already exists for attribute on cls or an ancestor, and cls
    can reach an accessor for it, the existing value is returned and `value`
    is silently discarded. This is what makes re-running a class body after
    a reload harmless.

    Returns the resolved value (NOTHING if none was ever set).
    """
    _check_name(attribute)
    store = store_for(cls)
    owner = store.find_owner(cls, attribute)
    if owner is not None:
        entry = _class_entry(cls, attribute)
        if is_accessor(entry):
            return store.get(cls, attribute)
        if entry is _UNSET:
            # Accessor dropped by a reload: put it back where the data lives.
            # Done here rather than via the fallback hook so plain classes
            # get the same treatment.
            _install_accessor(owner, attribute)
            return store.get(cls, attribute)

    _install_accessor(cls, attribute)
    if value is not NOTHING:
        return getattr(cls, attribute)(value)
    return store.get(cls, attribute)


def _autoload(cls: type, name: str) -> bool:
    """Recreate the accessor for name if cls's lineage holds data for it."""
    candidates = _candidates(name)
    if not candidates:
        return False
    if _tracing(cls):
        logger.debug("autoloading %r in %s", name, cls.__qualname__)
    store = store_for(cls)
    for attribute in candidates:
        owner = store.find_owner(cls, attribute)
        if owner is not None:
            # Put it back where it came from; cls inherits it from there.
            _install_accessor(owner, attribute)
            return True
    return False


class ReloadableMeta(type):
    """Metaclass providing the fallback hook for lookups on the class itself."""

    def __getattr__(cls, name):
        if _autoload(cls, name):
            return getattr(cls, name)
        # Maybe it was intended for another metaclass further along.
        fallback = _next_handler(cls, __class__, "__getattr__")
        if fallback is None:
            raise NoSuchCapability(cls, name)
        return fallback(name)


class ClassData(metaclass=ReloadableMeta):
    """Base class for classes holding reload-safe class data.

    Provides mk_classdata() and the fallback hooks for class and instance
    lookups. Other __getattr__ implementations further along the lineage still
    receive the names this class does not recognize.
    """

    __slots__ = ()

    @classmethod
    def mk_classdata(cls, attribute: str, value: object = NOTHING) -> object:
        """Create a class data slot, optionally setting a value into it.

        Also provides a `_<attribute>_accessor` alias. During a reload this
        may be called again for an existing attribute; the value passed is
        then ignored in favour of the one stored before the reload.
        """
        return declare(cls, attribute, value)

    def __getattr__(self, name):
        if _autoload(type(self), name):
            return getattr(self, name)
        fallback = _next_handler(self, __class__, "__getattr__")
        if fallback is None:
            raise NoSuchCapability(self, name)
        return fallback(name)

    def __del__(self):
        finalizer = _next_handler(self, __class__, "__del__")
        if finalizer is not None:
            finalizer()


class classdata:
    """Declare class data in a class body.

        class Stuff(ClassData):
            DataFile = classdata("/etc/stuff/data")

    The marker is replaced by an accessor when the class is created. The
    default only applies when nothing is stored yet for the class or an
    ancestor, so re-executing the body on reload keeps the current value.
    """

    __slots__ = ("default",)

    def __init__(self, default: object = NOTHING) -> None:
        self.default = default

    def __set_name__(self, owner: type, name: str) -> None:
        delattr(owner, name)
        declare(owner, name, self.default)

    def __repr__(self) -> str:
        return f"classdata({self.default!r})"
