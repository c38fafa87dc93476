import pytest

from mws_engine.catalog.registry import reset_catalog


@pytest.fixture(autouse=True)
def _fresh_catalog():
    # Every test starts from an empty registry; built-in sections are loaded
    # lazily on first lookup.
    reset_catalog()
    yield
    reset_catalog()
