"""Fixtures partagées pour les tests de saisie des factures."""

from datetime import date
from decimal import Decimal

import pytest

from facturation_tn.invoicing.editor import InvoiceEditor
from facturation_tn.models.catalog import Client, Product
from facturation_tn.storage.connectors.memory import MemoryStore
from facturation_tn.storage.fixtures import demo_store

TODAY = date(2024, 3, 1)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def editor() -> InvoiceEditor:
    """Éditeur vierge daté du 1er mars 2024."""
    return InvoiceEditor(today=TODAY)


@pytest.fixture
def store() -> MemoryStore:
    return demo_store()


@pytest.fixture
def client() -> Client:
    return Client(
        id="1",
        nom="Société Example",
        adresse="123 Rue Principale, Tunis, Tunisie",
        telephone="+216 71 123 456",
        email="contact@example.tn",
        tva="TN1234567",
    )


@pytest.fixture
def product() -> Product:
    return Product(
        id="3",
        designation="Développement Web",
        prix_unitaire_ht=Decimal("2000"),
        categorie_id="3",
    )
