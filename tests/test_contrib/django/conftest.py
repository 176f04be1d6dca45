"""Configuration pytest pour les tests Django.

FR: Configure Django avec SQLite in-memory et le store de démonstration.
EN: Configures Django with in-memory SQLite and the demo store.
"""

import django
from django.conf import settings


def pytest_configure() -> None:
    """Configure Django pour les tests."""
    if not settings.configured:
        settings.configure(
            DATABASES={
                "default": {
                    "ENGINE": "django.db.backends.sqlite3",
                    "NAME": ":memory:",
                },
            },
            INSTALLED_APPS=[
                "django.contrib.contenttypes",
                "facturation_tn.contrib.django",
            ],
            ROOT_URLCONF="facturation_tn.contrib.django.urls",
            FACTURATION_TN={
                "STORE_CLASS": "facturation_tn.storage.fixtures.demo_store",
            },
            USE_TZ=True,
        )
        django.setup()


import pytest  # noqa: E402

from facturation_tn.contrib.django.conf import load_store  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_store():
    """Chaque test repart d'un store de démonstration neuf."""
    load_store.cache_clear()
    yield
    load_store.cache_clear()
