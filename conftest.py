import pytest

from widgetpage.registry import registry


@pytest.fixture(autouse=True)
def clean_registry():
    registry.reset()
    yield registry
    registry.reset()
