import pytest

from library import CatalogManager
from ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture
def lib():
    # Fresh in-memory catalog for every test
    return CatalogManager()

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # The CLI stores --output in the environment; restore it after each test
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
