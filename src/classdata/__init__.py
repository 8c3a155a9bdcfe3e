"""classdata: inheritable, overridable class data that survives reloads."""

from importlib.metadata import version as _version

__version__ = _version("classdata")

from classdata.exceptions import ClassDataError, InvalidAttributeName, NoSuchCapability
from classdata.lineage import self_and_super_path
from classdata.store import NOTHING, ClassDataStore, class_key, default_store, store_for
from classdata.reloadable import (
    ClassData,
    ReloadableMeta,
    alias_name,
    classdata,
    declare,
    is_accessor,
    is_debug,
    set_debug,
)

__all__ = [
    "ClassData",
    "ReloadableMeta",
    "classdata",
    "declare",
    "alias_name",
    "is_accessor",
    "set_debug",
    "is_debug",
    "ClassDataStore",
    "default_store",
    "store_for",
    "class_key",
    "NOTHING",
    "self_and_super_path",
    "ClassDataError",
    "NoSuchCapability",
    "InvalidAttributeName",
]
