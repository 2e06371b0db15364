"""Shared catalogs for recipe tree tests."""

import pytest

from recipegraph import Catalog, DrugRecord


# =============================================================================
# Catalog builders
# =============================================================================


def make_catalog(recipes: dict[str, str | None]) -> Catalog:
    """Build a catalog from {name: recipe_text}, preserving order."""
    return Catalog(DrugRecord(name, recipe) for name, recipe in recipes.items())


@pytest.fixture
def abc_catalog() -> Catalog:
    """A -> B + C, B -> C + A (cycle back to A), C has an empty recipe."""
    return make_catalog({"A": "B + C", "B": "C + A", "C": ""})


@pytest.fixture
def three_level_catalog() -> Catalog:
    """Root -> (Mid1, Mid2), Mid1 -> (x, y), Mid2 -> (z). x, y, z are unknown."""
    return make_catalog({
        "Root": "Mid1 + Mid2",
        "Mid1": "x + y",
        "Mid2": "z",
    })


@pytest.fixture
def complete_cycle_catalog() -> Catalog:
    """Every drug's recipe references every drug, itself included."""
    names = ["P", "Q", "R", "S"]
    recipe = " + ".join(names)
    return make_catalog({name: recipe for name in names})


@pytest.fixture
def source_rows() -> list[dict]:
    """Rows in the shape of the source data.json."""
    return [
        {
            "Drug Name": "Speedball",
            "Recipe": "Cocaine + Heroin",
            "Price": 120,
            "Effects": "Euphoria",
            "Addictiveness": 9,
        },
        {
            "Drug Name": "Cocaine",
            "Recipe": "Coca Leaves + Gasoline",
            "Price": "80",
            "Effects": "NaN",
            "Addictiveness": 8.5,
        },
        {
            "Drug Name": "Heroin",
            "Recipe": "NaN",
            "Price": "NaN",
            "Effects": "Sedation",
            "Addictiveness": 10,
        },
    ]
