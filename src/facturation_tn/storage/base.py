"""Interface abstraite pour les connecteurs de stockage.

FR: Définit les opérations de lecture, création, mise à jour et suppression
    des clients, catégories, produits et factures, ainsi que les statistiques
    du tableau de bord. Le store est injecté dans les services : passer d'un
    stockage en mémoire à un stockage persistant ne touche pas aux calculs.
EN: Defines get/list/create/update/delete for clients, categories, products
    and invoices, plus dashboard statistics. The store is injected into the
    services.
"""

from abc import ABCMeta, abstractmethod
from collections.abc import Mapping

from facturation_tn.models.catalog import Category, Client, Product
from facturation_tn.models.invoice import Invoice, InvoiceRecord
from facturation_tn.storage.models import DashboardStats


class BaseStore(metaclass=ABCMeta):
    """Classe de base abstraite pour les connecteurs de stockage.

    FR: Les connecteurs concrets (mémoire, base de données, API distante)
        héritent de cette classe. Les méthodes sont asynchrones pour
        permettre un stockage distant.
    EN: Concrete connectors (memory, database, remote API) inherit from this
        class. Methods are async to allow remote storage.
    """

    # --- Clients ---

    @abstractmethod
    async def list_clients(self) -> list[Client]:
        """Retourne tous les clients."""
        ...

    @abstractmethod
    async def get_client(self, client_id: str) -> Client | None:
        """Retourne un client, ou None s'il n'existe pas."""
        ...

    @abstractmethod
    async def create_client(self, client: Client) -> Client:
        """Enregistre un nouveau client.

        Args:
            client: Le client à créer (l'identifiant fourni est ignoré).

        Returns:
            Le client enregistré, avec son identifiant.
        """
        ...

    @abstractmethod
    async def update_client(
        self, client_id: str, changes: Mapping[str, object]
    ) -> Client:
        """Met à jour partiellement un client.

        Args:
            client_id: L'identifiant du client.
            changes: Les champs à modifier.

        Returns:
            Le client mis à jour.

        Raises:
            StoreNotFoundError: Si le client n'existe pas.
        """
        ...

    @abstractmethod
    async def delete_client(self, client_id: str) -> None:
        """Supprime un client.

        Raises:
            StoreNotFoundError: Si le client n'existe pas.
        """
        ...

    # --- Catégories ---

    @abstractmethod
    async def list_categories(self) -> list[Category]:
        """Retourne toutes les catégories."""
        ...

    @abstractmethod
    async def get_category(self, category_id: str) -> Category | None:
        """Retourne une catégorie, ou None si elle n'existe pas."""
        ...

    @abstractmethod
    async def create_category(self, category: Category) -> Category:
        """Enregistre une nouvelle catégorie."""
        ...

    @abstractmethod
    async def update_category(
        self, category_id: str, changes: Mapping[str, object]
    ) -> Category:
        """Met à jour partiellement une catégorie.

        Raises:
            StoreNotFoundError: Si la catégorie n'existe pas.
        """
        ...

    @abstractmethod
    async def delete_category(self, category_id: str) -> None:
        """Supprime une catégorie.

        Raises:
            StoreNotFoundError: Si la catégorie n'existe pas.
            StoreConflictError: Si des produits utilisent la catégorie.
        """
        ...

    # --- Produits ---

    @abstractmethod
    async def list_products(self) -> list[Product]:
        """Retourne tous les produits avec leur catégorie résolue."""
        ...

    @abstractmethod
    async def get_product(self, product_id: str) -> Product | None:
        """Retourne un produit avec sa catégorie, ou None."""
        ...

    @abstractmethod
    async def create_product(self, product: Product) -> Product:
        """Enregistre un nouveau produit."""
        ...

    @abstractmethod
    async def update_product(
        self, product_id: str, changes: Mapping[str, object]
    ) -> Product:
        """Met à jour partiellement un produit.

        Raises:
            StoreNotFoundError: Si le produit n'existe pas.
        """
        ...

    @abstractmethod
    async def delete_product(self, product_id: str) -> None:
        """Supprime un produit.

        Raises:
            StoreNotFoundError: Si le produit n'existe pas.
            StoreConflictError: Si une ligne de facture référence le produit.
        """
        ...

    # --- Factures ---

    @abstractmethod
    async def list_invoices(self) -> list[InvoiceRecord]:
        """Retourne toutes les factures avec leur client résolu."""
        ...

    @abstractmethod
    async def get_invoice(self, invoice_id: str) -> InvoiceRecord | None:
        """Retourne une facture avec son client, ou None."""
        ...

    @abstractmethod
    async def create_invoice(self, invoice: Invoice) -> InvoiceRecord:
        """Enregistre une nouvelle facture.

        FR: Le store attribue un identifiant à la facture et à chacune de ses
            lignes. Le numéro n'est pas attribué ici : il est calculé par
            l'appelant à partir des factures existantes.
        EN: The store assigns ids to the invoice and its lines. The number is
            allocated by the caller.

        Args:
            invoice: La facture à enregistrer.

        Returns:
            La facture enregistrée avec son client résolu.
        """
        ...

    @abstractmethod
    async def update_invoice(
        self, invoice_id: str, changes: Mapping[str, object]
    ) -> InvoiceRecord:
        """Met à jour partiellement une facture.

        Raises:
            StoreNotFoundError: Si la facture n'existe pas.
        """
        ...

    @abstractmethod
    async def delete_invoice(self, invoice_id: str) -> None:
        """Supprime une facture.

        Raises:
            StoreNotFoundError: Si la facture n'existe pas.
        """
        ...

    # --- Tableau de bord ---

    @abstractmethod
    async def get_dashboard_stats(self) -> DashboardStats:
        """Calcule les statistiques du tableau de bord."""
        ...
