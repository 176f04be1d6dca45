"""Connecteur de stockage en mémoire pour les tests et le développement.

FR: Conserve clients, catégories, produits et factures dans des
    dictionnaires propres à l'instance. Utile pour le développement, les
    tests unitaires et la démonstration.
EN: Keeps clients, categories, products and invoices in per-instance
    dictionaries.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from decimal import Decimal

from pydantic import BaseModel

from facturation_tn.models.catalog import Category, Client, Product
from facturation_tn.models.invoice import Invoice, InvoiceLine, InvoiceRecord
from facturation_tn.storage.base import BaseStore
from facturation_tn.storage.errors import StoreConflictError, StoreNotFoundError
from facturation_tn.storage.models import DashboardStats

logger = logging.getLogger(__name__)

RECENT_INVOICES_LIMIT = 5


def _new_id() -> str:
    """Génère un identifiant opaque."""
    return uuid.uuid4().hex[:13]


def _with_id(model: BaseModel) -> BaseModel:
    """Attribue un identifiant aux données initiales qui n'en ont pas."""
    if model.id:
        return model
    return model.model_copy(update={"id": _new_id()})


def _merge(
    model: BaseModel, changes: Mapping[str, object], **forced: object
) -> BaseModel:
    """Applique des modifications partielles en revalidant le modèle."""
    data = {**model.model_dump(), **changes, **forced}
    return type(model).model_validate(data)


class MemoryStore(BaseStore):
    """Connecteur de stockage en mémoire.

    FR: Implémente l'interface BaseStore complète en mémoire. Les données
        initiales sont optionnelles ; chaque instance a son propre état.
    EN: Implements the full BaseStore interface in memory. Each instance
        owns its state.
    """

    def __init__(
        self,
        *,
        clients: Iterable[Client] = (),
        categories: Iterable[Category] = (),
        products: Iterable[Product] = (),
        invoices: Iterable[Invoice] = (),
    ) -> None:
        self._clients: dict[str, Client] = {
            c.id: c for c in (_with_id(c) for c in clients)
        }
        self._categories: dict[str, Category] = {
            c.id: c for c in (_with_id(c) for c in categories)
        }
        self._products: dict[str, Product] = {
            p.id: p for p in (_with_id(p) for p in products)
        }
        self._invoices: dict[str, Invoice] = {}
        for invoice in invoices:
            stored = self._prepare_invoice(invoice, invoice.id or _new_id())
            self._invoices[stored.id] = stored

    # --- Résolution des références ---

    def _with_category(self, product: Product) -> Product:
        category = self._categories.get(product.categorie_id)
        return product.model_copy(update={"categorie": category})

    def _with_client(self, invoice: Invoice) -> InvoiceRecord:
        return InvoiceRecord.model_validate(
            {
                **invoice.model_dump(),
                "client": self._clients.get(invoice.client_id),
            }
        )

    @staticmethod
    def _prepare_invoice(invoice: Invoice, invoice_id: str) -> Invoice:
        """Attribue les identifiants de la facture et de ses lignes."""
        lines = [
            InvoiceLine.model_validate(
                {
                    **line.model_dump(),
                    "id": line.id or _new_id(),
                    "facture_id": invoice_id,
                }
            )
            for line in invoice.lignes
        ]
        data = invoice.model_dump(exclude={"client"})
        data.update(id=invoice_id, lignes=lines)
        return Invoice.model_validate(data)

    # --- Clients ---

    async def list_clients(self) -> list[Client]:
        """Retourne tous les clients."""
        return list(self._clients.values())

    async def get_client(self, client_id: str) -> Client | None:
        """Retourne un client ou None."""
        return self._clients.get(client_id)

    async def create_client(self, client: Client) -> Client:
        """Enregistre un client avec un nouvel identifiant."""
        created = client.model_copy(update={"id": _new_id()})
        self._clients[created.id] = created
        logger.info("Client ajouté avec succès : %s", created.nom)
        return created

    async def update_client(
        self, client_id: str, changes: Mapping[str, object]
    ) -> Client:
        """Met à jour un client existant."""
        existing = self._clients.get(client_id)
        if existing is None:
            msg = f"Client non trouvé : {client_id}"
            raise StoreNotFoundError(msg)
        updated = _merge(existing, changes, id=client_id)
        self._clients[client_id] = updated
        logger.info("Client mis à jour avec succès : %s", updated.nom)
        return updated

    async def delete_client(self, client_id: str) -> None:
        """Supprime un client existant."""
        if self._clients.pop(client_id, None) is None:
            msg = f"Client non trouvé : {client_id}"
            raise StoreNotFoundError(msg)
        logger.info("Client supprimé avec succès : %s", client_id)

    # --- Catégories ---

    async def list_categories(self) -> list[Category]:
        """Retourne toutes les catégories."""
        return list(self._categories.values())

    async def get_category(self, category_id: str) -> Category | None:
        """Retourne une catégorie ou None."""
        return self._categories.get(category_id)

    async def create_category(self, category: Category) -> Category:
        """Enregistre une catégorie avec un nouvel identifiant."""
        created = category.model_copy(update={"id": _new_id()})
        self._categories[created.id] = created
        logger.info("Catégorie ajoutée avec succès : %s", created.nom)
        return created

    async def update_category(
        self, category_id: str, changes: Mapping[str, object]
    ) -> Category:
        """Met à jour une catégorie existante."""
        existing = self._categories.get(category_id)
        if existing is None:
            msg = f"Catégorie non trouvée : {category_id}"
            raise StoreNotFoundError(msg)
        updated = _merge(existing, changes, id=category_id)
        self._categories[category_id] = updated
        logger.info("Catégorie mise à jour avec succès : %s", updated.nom)
        return updated

    async def delete_category(self, category_id: str) -> None:
        """Supprime une catégorie non utilisée."""
        if category_id not in self._categories:
            msg = f"Catégorie non trouvée : {category_id}"
            raise StoreNotFoundError(msg)
        if any(p.categorie_id == category_id for p in self._products.values()):
            msg = "Impossible de supprimer une catégorie utilisée par des produits"
            raise StoreConflictError(msg)
        del self._categories[category_id]
        logger.info("Catégorie supprimée avec succès : %s", category_id)

    # --- Produits ---

    async def list_products(self) -> list[Product]:
        """Retourne tous les produits avec leur catégorie."""
        return [self._with_category(p) for p in self._products.values()]

    async def get_product(self, product_id: str) -> Product | None:
        """Retourne un produit avec sa catégorie, ou None."""
        product = self._products.get(product_id)
        if product is None:
            return None
        return self._with_category(product)

    async def create_product(self, product: Product) -> Product:
        """Enregistre un produit avec un nouvel identifiant."""
        created = product.model_copy(update={"id": _new_id(), "categorie": None})
        self._products[created.id] = created
        logger.info("Produit ajouté avec succès : %s", created.designation)
        return self._with_category(created)

    async def update_product(
        self, product_id: str, changes: Mapping[str, object]
    ) -> Product:
        """Met à jour un produit existant."""
        existing = self._products.get(product_id)
        if existing is None:
            msg = f"Produit non trouvé : {product_id}"
            raise StoreNotFoundError(msg)
        updated = _merge(existing, changes, id=product_id, categorie=None)
        self._products[product_id] = updated
        logger.info("Produit mis à jour avec succès : %s", updated.designation)
        return self._with_category(updated)

    async def delete_product(self, product_id: str) -> None:
        """Supprime un produit absent de toute facture."""
        if product_id not in self._products:
            msg = f"Produit non trouvé : {product_id}"
            raise StoreNotFoundError(msg)
        used = any(
            line.produit_id == product_id
            for invoice in self._invoices.values()
            for line in invoice.lignes
        )
        if used:
            msg = "Impossible de supprimer un produit utilisé dans des factures"
            raise StoreConflictError(msg)
        del self._products[product_id]
        logger.info("Produit supprimé avec succès : %s", product_id)

    # --- Factures ---

    async def list_invoices(self) -> list[InvoiceRecord]:
        """Retourne toutes les factures avec leur client."""
        return [self._with_client(inv) for inv in self._invoices.values()]

    async def get_invoice(self, invoice_id: str) -> InvoiceRecord | None:
        """Retourne une facture avec son client, ou None."""
        invoice = self._invoices.get(invoice_id)
        if invoice is None:
            return None
        return self._with_client(invoice)

    async def create_invoice(self, invoice: Invoice) -> InvoiceRecord:
        """Enregistre une facture et numérote ses lignes."""
        stored = self._prepare_invoice(invoice, _new_id())
        self._invoices[stored.id] = stored
        logger.info("Facture créée avec succès : %s", stored.numero)
        return self._with_client(stored)

    async def update_invoice(
        self, invoice_id: str, changes: Mapping[str, object]
    ) -> InvoiceRecord:
        """Met à jour une facture ; les nouvelles lignes reçoivent un identifiant."""
        existing = self._invoices.get(invoice_id)
        if existing is None:
            msg = f"Facture non trouvée : {invoice_id}"
            raise StoreNotFoundError(msg)
        merged = _merge(existing, changes, id=invoice_id)
        stored = self._prepare_invoice(merged, invoice_id)
        self._invoices[invoice_id] = stored
        logger.info("Facture mise à jour avec succès : %s", stored.numero)
        return self._with_client(stored)

    async def delete_invoice(self, invoice_id: str) -> None:
        """Supprime une facture existante."""
        invoice = self._invoices.pop(invoice_id, None)
        if invoice is None:
            msg = f"Facture non trouvée : {invoice_id}"
            raise StoreNotFoundError(msg)
        logger.info("Facture supprimée avec succès : %s", invoice.numero)

    # --- Tableau de bord ---

    async def get_dashboard_stats(self) -> DashboardStats:
        """Agrège les compteurs et les factures récentes."""
        invoices = list(self._invoices.values())
        recent = sorted(invoices, key=lambda inv: inv.date, reverse=True)
        return DashboardStats(
            client_count=len(self._clients),
            product_count=len(self._products),
            invoice_total=sum((inv.total_ttc for inv in invoices), start=Decimal("0")),
            recent_invoices=[
                self._with_client(inv) for inv in recent[:RECENT_INVOICES_LIMIT]
            ],
        )
