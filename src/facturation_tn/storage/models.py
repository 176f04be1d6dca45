"""Modèles de données pour les réponses du store.

FR: Agrégats calculés par le store pour le tableau de bord.
EN: Aggregates computed by the store for the dashboard.
"""

from decimal import Decimal

from pydantic import BaseModel

from facturation_tn.models.invoice import InvoiceRecord


class DashboardStats(BaseModel):
    """Statistiques du tableau de bord.

    FR: Nombre de clients et de produits, somme des totaux TTC de toutes les
        factures (toutes devises confondues, sans conversion) et les cinq
        factures les plus récentes.
    EN: Client and product counts, sum of all invoice totals (currencies
        mixed, no conversion) and the five most recent invoices.
    """

    client_count: int
    product_count: int
    invoice_total: Decimal
    recent_invoices: list[InvoiceRecord]
