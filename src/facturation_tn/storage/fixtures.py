"""Import d'enregistrements hérités et jeu de données de démonstration.

FR: Les enregistrements de factures hérités contiennent des totaux figés
    (``total_ht``, ``total_ttc``, ``reste_a_payer``) qui ne font pas
    autorité : ils sont recalculés à partir des lignes, et chaque écart est
    signalé dans les logs. L'exemple historique ``FACT-2023-001`` stocke
    ``total_ttc=2380`` alors que 2000 + 380 (TVA 19 %) + 1 (timbre) = 2381.
EN: Legacy invoice records carry frozen totals that are not authoritative:
    they are recomputed from the lines and every mismatch is logged.
"""

import logging
from collections.abc import Mapping
from datetime import date
from decimal import Decimal

from facturation_tn.computation.totals import to_decimal
from facturation_tn.models.catalog import Category, Client, Product
from facturation_tn.models.invoice import Invoice
from facturation_tn.storage.connectors.memory import MemoryStore

logger = logging.getLogger(__name__)

_CHECKED_TOTALS = ("total_ht", "total_ttc", "reste_a_payer")


def find_total_discrepancies(
    invoice: Invoice, data: Mapping[str, object]
) -> dict[str, tuple[Decimal, Decimal]]:
    """Compare les totaux stockés d'un enregistrement aux totaux recalculés.

    Returns:
        Un dictionnaire ``champ -> (valeur stockée, valeur recalculée)``
        limité aux champs en écart.
    """
    discrepancies: dict[str, tuple[Decimal, Decimal]] = {}
    for name in _CHECKED_TOTALS:
        stored = data.get(name)
        if stored is None:
            continue
        computed = getattr(invoice, name)
        if to_decimal(stored) != computed:
            discrepancies[name] = (to_decimal(stored), computed)
    return discrepancies


def load_invoice_record(data: Mapping[str, object]) -> Invoice:
    """Valide un enregistrement de facture hérité.

    FR: Les totaux de l'enregistrement sont ignorés au profit des formules ;
        un avertissement est émis pour chaque total stocké en écart.
    EN: Stored totals are ignored in favour of the formulas; a warning is
        logged for each mismatching stored total.

    Args:
        data: L'enregistrement brut (clés ``numero``, ``lignes``, ...).

    Returns:
        La facture validée, aux totaux recalculés.
    """
    invoice = Invoice.model_validate(dict(data))
    for name, (stored, computed) in find_total_discrepancies(invoice, data).items():
        logger.warning(
            "Facture %s : %s stocké %s différent du calcul %s (valeur recalculée retenue)",
            invoice.numero,
            name,
            stored,
            computed,
        )
    return invoice


SAMPLE_CLIENTS = [
    Client(
        id="1",
        nom="Société Example",
        adresse="123 Rue Principale, Tunis, Tunisie",
        telephone="+216 71 123 456",
        email="contact@example.tn",
        tva="TN1234567",
    ),
    Client(
        id="2",
        nom="Entreprise ABC",
        adresse="45 Avenue Habib Bourguiba, Sfax, Tunisie",
        telephone="+216 74 987 654",
        email="info@abc.tn",
        tva="TN7654321",
    ),
]

SAMPLE_CATEGORIES = [
    Category(id="1", nom="Informatique"),
    Category(id="2", nom="Bureautique"),
    Category(id="3", nom="Services"),
]

SAMPLE_PRODUCTS = [
    Product(
        id="1",
        designation="Ordinateur Portable",
        prix_unitaire_ht=Decimal("1500"),
        categorie_id="1",
    ),
    Product(
        id="2",
        designation="Imprimante Laser",
        prix_unitaire_ht=Decimal("400"),
        categorie_id="2",
    ),
    Product(
        id="3",
        designation="Développement Web",
        prix_unitaire_ht=Decimal("2000"),
        categorie_id="3",
    ),
]

SAMPLE_INVOICE_RECORDS: list[dict[str, object]] = [
    {
        "id": "1",
        "numero": "FACT-2023-001",
        "date": date(2023, 12, 15),
        "client_id": "1",
        "devise": "DT",
        "tva_active": True,
        "remise_active": False,
        "timbre_active": True,
        "avance_active": False,
        "avance_montant": 0,
        "total_ht": 2000,
        "total_ttc": 2380,
        "reste_a_payer": 2380,
        "lignes": [
            {
                "id": "1",
                "facture_id": "1",
                "produit_id": "3",
                "designation": "Développement Web",
                "quantite": 1,
                "prix_unitaire": 2000,
                "remise": 0,
                "tva": 19,
                "total_ht": 2000,
            }
        ],
    },
]


def demo_store() -> MemoryStore:
    """Construit un store en mémoire garni des données de démonstration."""
    return MemoryStore(
        clients=SAMPLE_CLIENTS,
        categories=SAMPLE_CATEGORIES,
        products=SAMPLE_PRODUCTS,
        invoices=[load_invoice_record(record) for record in SAMPLE_INVOICE_RECORDS],
    )
