import pytest

from classdata import ClassDataStore, set_debug


@pytest.fixture
def store():
    """Fresh, isolated store. Classes opt in with `_classdata_store = store`."""
    return ClassDataStore()


@pytest.fixture(autouse=True)
def _debug_off():
    yield
    set_debug(False)
