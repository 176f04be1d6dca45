"""Stockage des clients, catégories, produits et factures.

FR: Interface abstraite injectable, connecteur en mémoire et import
    d'enregistrements hérités.
EN: Injectable abstract interface, in-memory connector and legacy record
    import.
"""

from facturation_tn.storage.base import BaseStore
from facturation_tn.storage.connectors.memory import MemoryStore
from facturation_tn.storage.errors import (
    StoreConflictError,
    StoreError,
    StoreNotFoundError,
)
from facturation_tn.storage.fixtures import demo_store, load_invoice_record
from facturation_tn.storage.models import DashboardStats

__all__ = [
    "BaseStore",
    "DashboardStats",
    "MemoryStore",
    "StoreConflictError",
    "StoreError",
    "StoreNotFoundError",
    "demo_store",
    "load_invoice_record",
]
