import pytest

from pizzeria.debug_log import set_debug_log_path
from pizzeria.models import Crust, Ingredient, Recipe
from pizzeria.store import CatalogStore


@pytest.fixture(autouse=True)
def _isolated_debug_log(tmp_path, monkeypatch):
    monkeypatch.setenv("PIZZERIA_DEBUG_LOG", str(tmp_path / "debug.log"))
    monkeypatch.delenv("PIZZERIA_CURRENCY_SUFFIX", raising=False)
    set_debug_log_path(None)
    yield
    set_debug_log_path(None)


@pytest.fixture
def stocked_store() -> CatalogStore:
    store = CatalogStore()
    store.add_crust(Crust("Classic", "1.5", is_classic=True))
    store.add_crust(Crust("Thin", "1.0"))
    store.add_recipe(Recipe("Margherita", "8.0"))
    store.add_ingredient(Ingredient("Cheese", "2"))
    store.add_ingredient(Ingredient("Ham", "3"))
    return store
