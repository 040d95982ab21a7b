"""
Pytest configuration for the cat database server.

Provides fixtures for:
- The seed dataset and a router over it
- Custom datasets for edge cases (empty, no indoor cats)
"""

import pytest

from core.cat_store import CatDataset, load_seed_dataset
from core.models import Cat
from tools.router import CatToolRouter


@pytest.fixture
def dataset() -> CatDataset:
    return load_seed_dataset()


@pytest.fixture
def router(dataset: CatDataset) -> CatToolRouter:
    return CatToolRouter(dataset)


@pytest.fixture
def empty_router() -> CatToolRouter:
    return CatToolRouter(CatDataset())


@pytest.fixture
def outdoor_only_dataset() -> CatDataset:
    return CatDataset(
        [
            Cat(id=10, name="Tora", age=4, breed="Bengal", color="Spotted",
                is_indoor=False, favorite_toy="Feather"),
            Cat(id=11, name="Hachi", age=1, breed="Maine Coon", color="Brown",
                is_indoor=False, favorite_toy="Box"),
        ]
    )
