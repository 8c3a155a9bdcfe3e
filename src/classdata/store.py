"""ClassDataStore: class-keyed side table for inheritable class data.

Values are keyed by class identifier (module + qualified name), not by the
class object, so a class object recreated by a reload finds the slots its
predecessor filled.

The process-wide store wraps the mapping in _anchor. Construct a fresh
ClassDataStore for an isolated tree of classes (tests do this).
"""

from __future__ import annotations

from classdata import _anchor
from classdata.lineage import self_and_super_path


class _Nothing:
    """Sentinel for "no value stored anywhere in the chain"."""

    __slots__ = ()
    _instance: _Nothing | None = None

    def __new__(cls) -> _Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self):
        return "NOTHING"


NOTHING = _Nothing()


def class_key(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class ClassDataStore:
    """Two-level mapping: class identifier -> attribute name -> value."""

    def __init__(self, data: dict[str, dict[str, object]] | None = None) -> None:
        self._data: dict[str, dict[str, object]] = {} if data is None else data

    def get(self, cls: type, attribute: str) -> object:
        """Resolve attribute for cls: nearest-ancestor-or-self value, else NOTHING."""
        for klass in self_and_super_path(cls):
            slots = self._data.get(class_key(klass))
            if slots is not None and attribute in slots:
                return slots[attribute]
        return NOTHING

    def set(self, cls: type, attribute: str, value: object) -> object:
        """Write into cls's own slot. Ancestor slots are never touched."""
        self._data.setdefault(class_key(cls), {})[attribute] = value
        return value

    def find_owner(self, cls: type, attribute: str) -> type | None:
        """Nearest class in cls's lineage holding a value for attribute."""
        for klass in self_and_super_path(cls):
            slots = self._data.get(class_key(klass))
            if slots is not None and attribute in slots:
                return klass
        return None

    def has(self, cls: type, attribute: str) -> bool:
        return self.find_owner(cls, attribute) is not None

    def own(self, cls: type) -> dict[str, object]:
        return dict(self._data.get(class_key(cls), {}))

    def visible(self, cls: type) -> dict[str, object]:
        """Every attribute reachable from cls, mapped to its resolved value."""
        result: dict[str, object] = {}
        for klass in self_and_super_path(cls):
            for attribute, value in self._data.get(class_key(klass), {}).items():
                result.setdefault(attribute, value)
        return result

    def __repr__(self) -> str:
        return f"ClassDataStore({len(self._data)} classes)"


default_store = ClassDataStore(_anchor.class_data)


def store_for(cls: type) -> ClassDataStore:
    """The store a class tree uses: its _classdata_store, else the default."""
    for klass in cls.__mro__:
        store = klass.__dict__.get("_classdata_store")
        if store is not None:
            return store
    return default_store
