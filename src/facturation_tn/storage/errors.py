"""Hiérarchie d'exceptions pour les opérations du store.

FR: Exceptions typées pour les ressources introuvables et les suppressions
    refusées (entité encore référencée).
EN: Typed exceptions for missing resources and refused deletions (entity
    still referenced).
"""


class StoreError(Exception):
    """Erreur de base pour toutes les opérations du store.

    FR: Classe parente de toutes les exceptions levées par les connecteurs
        de stockage.
    EN: Base class for all storage connector exceptions.
    """


class StoreNotFoundError(StoreError):
    """Ressource introuvable.

    FR: Client, catégorie, produit ou facture absent lors d'une mise à jour
        ou d'une suppression.
    EN: Client, category, product or invoice missing on update or delete.
    """


class StoreConflictError(StoreError):
    """Suppression refusée : l'entité est encore utilisée.

    FR: Catégorie utilisée par des produits, produit utilisé dans des
        factures.
    EN: Category used by products, product used in invoices.
    """
