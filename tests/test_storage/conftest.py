"""Fixtures partagées pour les tests du stockage."""

from datetime import date
from decimal import Decimal

import pytest

from facturation_tn.models.catalog import Category, Client, Product
from facturation_tn.models.invoice import Invoice, InvoiceLine
from facturation_tn.storage.connectors.memory import MemoryStore
from facturation_tn.storage.fixtures import demo_store


@pytest.fixture
def memory_store() -> MemoryStore:
    """Store vide."""
    return MemoryStore()


@pytest.fixture
def seeded_store() -> MemoryStore:
    """Store garni des données de démonstration."""
    return demo_store()


@pytest.fixture
def sample_client() -> Client:
    """Client de test."""
    return Client(
        nom="Atelier Carthage",
        adresse="8 rue de Marseille, Tunis",
        telephone="+216 71 000 111",
        email="contact@carthage.tn",
        tva="TN0001112",
    )


@pytest.fixture
def sample_invoice() -> Invoice:
    """Facture de test : 2 x 1500 + 1 x 400 remisé à 50 %."""
    return Invoice(
        numero="FACT-2024-001",
        date=date(2024, 2, 10),
        client_id="1",
        lignes=[
            InvoiceLine(
                produit_id="1",
                designation="Ordinateur Portable",
                quantite=Decimal("2"),
                prix_unitaire=Decimal("1500"),
            ),
            InvoiceLine(
                produit_id="2",
                designation="Imprimante Laser",
                quantite=Decimal("1"),
                prix_unitaire=Decimal("400"),
                remise=Decimal("50"),
            ),
        ],
    )


@pytest.fixture
def sample_category() -> Category:
    """Catégorie de test."""
    return Category(nom="Réseaux")


@pytest.fixture
def sample_product() -> Product:
    """Produit de test."""
    return Product(
        designation="Routeur",
        prix_unitaire_ht=Decimal("250"),
        categorie_id="1",
    )
