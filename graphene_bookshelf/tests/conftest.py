import pytest

from ..registry import reset_global_registry
from ..store import Store


@pytest.fixture(autouse=True)
def reset_registry():
    reset_global_registry()


@pytest.fixture
def store():
    return Store()


@pytest.fixture
def empty_store():
    return Store(seed=False)


@pytest.fixture
def context(store):
    return {"store": store}
