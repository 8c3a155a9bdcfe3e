"""Tests for ClassDataStore."""

import pickle

from classdata import NOTHING, ClassDataStore, ClassData, class_key, default_store, store_for
from classdata import _anchor


class A:
    pass


class B(A):
    pass


class C(B):
    pass


class TestResolve:
    def test_inherited_from_root(self):
        s = ClassDataStore()
        s.set(A, "colour", "red")
        assert s.get(A, "colour") == "red"
        assert s.get(B, "colour") == "red"
        assert s.get(C, "colour") == "red"

    def test_nearest_wins(self):
        s = ClassDataStore()
        s.set(A, "colour", "red")
        s.set(B, "colour", "blue")
        assert s.get(C, "colour") == "blue"
        assert s.get(A, "colour") == "red"

    def test_set_does_not_touch_ancestor(self):
        s = ClassDataStore()
        s.set(A, "colour", "red")
        s.set(C, "colour", "green")
        assert s.get(C, "colour") == "green"
        assert s.get(B, "colour") == "red"
        assert s.get(A, "colour") == "red"

    def test_missing_is_nothing(self):
        s = ClassDataStore()
        assert s.get(C, "never_declared") is NOTHING

    def test_none_is_a_value(self):
        s = ClassDataStore()
        s.set(A, "colour", "red")
        s.set(B, "colour", None)
        assert s.get(C, "colour") is None

    def test_diamond_resolves_depth_first(self):
        class Top:
            pass

        class Left(Top):
            pass

        class Right(Top):
            pass

        class Bottom(Left, Right):
            pass

        s = ClassDataStore()
        s.set(Top, "colour", "top")
        s.set(Right, "colour", "right")
        # C3 would reach Right before Top
        assert s.get(Bottom, "colour") == "top"
        assert s.find_owner(Bottom, "colour") is Top
        assert s.visible(Bottom) == {"colour": "top"}

    def test_set_returns_value(self):
        s = ClassDataStore()
        assert s.set(A, "n", 3) == 3


class TestOwner:
    def test_find_owner(self):
        s = ClassDataStore()
        s.set(A, "colour", "red")
        assert s.find_owner(C, "colour") is A
        s.set(B, "colour", "blue")
        assert s.find_owner(C, "colour") is B

    def test_no_owner(self):
        s = ClassDataStore()
        assert s.find_owner(C, "colour") is None
        assert not s.has(C, "colour")

    def test_has(self):
        s = ClassDataStore()
        s.set(B, "colour", "blue")
        assert s.has(C, "colour")
        assert not s.has(A, "colour")

    def test_keyed_by_identifier_not_object(self):
        """A recreated class with the same module and qualname sees the same slots."""
        s = ClassDataStore()
        s.set(A, "colour", "red")
        Twin = type("A", (), {"__module__": A.__module__, "__qualname__": A.__qualname__})
        assert Twin is not A
        assert s.get(Twin, "colour") == "red"
        assert s.find_owner(Twin, "colour") is Twin


class TestIntrospection:
    def test_own(self):
        s = ClassDataStore()
        s.set(A, "colour", "red")
        s.set(B, "size", 2)
        assert s.own(B) == {"size": 2}
        assert s.own(C) == {}

    def test_own_is_a_copy(self):
        s = ClassDataStore()
        s.set(A, "colour", "red")
        s.own(A)["colour"] = "blue"
        assert s.get(A, "colour") == "red"

    def test_visible(self):
        s = ClassDataStore()
        s.set(A, "colour", "red")
        s.set(A, "size", 1)
        s.set(B, "size", 2)
        assert s.visible(C) == {"colour": "red", "size": 2}


class TestNothing:
    def test_falsy(self):
        assert not NOTHING

    def test_repr(self):
        assert repr(NOTHING) == "NOTHING"

    def test_singleton_survives_pickle(self):
        assert pickle.loads(pickle.dumps(NOTHING)) is NOTHING


class TestDefaultStore:
    def test_default_store_uses_anchor(self):
        class Local:
            pass

        default_store.set(Local, "x", 1)
        assert _anchor.class_data[class_key(Local)] == {"x": 1}

    def test_store_for_default(self):
        class Plain(ClassData):
            pass

        assert store_for(Plain) is default_store

    def test_store_for_inherited(self, store):
        class Root(ClassData):
            _classdata_store = store

        class Leaf(Root):
            pass

        assert store_for(Leaf) is store

    def test_class_key(self):
        assert class_key(C) == f"{__name__}.C"
