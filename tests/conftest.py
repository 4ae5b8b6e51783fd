from datetime import date

import pytest

from travelquote.catalog import PackageCatalog
from travelquote.estimator import BookingEstimator
from travelquote.models import TravelPackage

SATURDAY = date(2024, 1, 6)
SUNDAY = date(2024, 1, 7)
MONDAY = date(2024, 1, 8)
WEDNESDAY = date(2024, 1, 10)


@pytest.fixture
def catalog():
    return PackageCatalog.default()


@pytest.fixture
def synthetic_catalog():
    return PackageCatalog([
        TravelPackage(id=10, destination="Shimla", duration_days=3, base_price=1000, season="Summer"),
        TravelPackage(id=20, destination="Manali", duration_days=5, base_price=2000, season="winter"),
        TravelPackage(id=30, destination="Goa", duration_days=4, base_price=999, season="Monsoon"),
    ])


@pytest.fixture
def estimator(catalog):
    return BookingEstimator(catalog)
