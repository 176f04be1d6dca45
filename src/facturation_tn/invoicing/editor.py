"""Saisie d'une facture : brouillon, lignes, options et enregistrement.

FR: ``InvoiceEditor`` porte l'état d'un formulaire de facturation. Les totaux
    sont toujours recalculés à partir du brouillon ; l'enregistrement valide
    le brouillon, attribue le numéro à partir des factures du store puis
    repart d'un brouillon vierge portant le numéro suivant.
EN: ``InvoiceEditor`` holds the state of an invoicing form. Totals are always
    recomputed from the draft; saving validates it, allocates the number from
    the store's invoices and starts a fresh draft with the next number.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable
from decimal import Decimal

from facturation_tn.computation.numbering import next_invoice_number
from facturation_tn.computation.totals import InvoiceTotals, Number, to_decimal
from facturation_tn.invoicing.errors import InvoiceValidationError
from facturation_tn.models.catalog import Client, Product
from facturation_tn.models.enums import Currency
from facturation_tn.models.invoice import Invoice, InvoiceLine, InvoiceRecord
from facturation_tn.storage.base import BaseStore

logger = logging.getLogger(__name__)

SEARCH_MIN_LENGTH = 2
"""Nombre minimal de caractères pour lancer une recherche / Min search length."""


def search_clients(clients: Iterable[Client], query: str) -> list[Client]:
    """Filtre les clients par nom ou email (insensible à la casse).

    Une requête de moins de deux caractères ne renvoie rien.
    """
    needle = query.strip().lower()
    if len(needle) < SEARCH_MIN_LENGTH:
        return []
    return [c for c in clients if needle in c.nom.lower() or needle in c.email.lower()]


def search_products(products: Iterable[Product], query: str) -> list[Product]:
    """Filtre les produits par désignation (insensible à la casse)."""
    needle = query.strip().lower()
    if len(needle) < SEARCH_MIN_LENGTH:
        return []
    return [p for p in products if needle in p.designation.lower()]


class InvoiceEditor:
    """Éditeur de brouillon de facture.

    Args:
        existing_invoices: Factures connues, pour numéroter le brouillon.
        today: Date de référence (par défaut aujourd'hui).
    """

    def __init__(
        self,
        existing_invoices: Iterable[object] = (),
        today: datetime.date | None = None,
    ) -> None:
        self.today = today or datetime.date.today()
        self.client: Client | None = None
        self.draft = self._blank_draft(next_invoice_number(existing_invoices, self.today))

    def _blank_draft(self, numero: str) -> Invoice:
        return Invoice(numero=numero, date=self.today, lignes=[InvoiceLine()])

    # --- Client ---

    def select_client(self, client: Client) -> None:
        """Associe un client au brouillon."""
        self.client = client
        self.draft.client_id = client.id or ""

    def clear_client(self) -> None:
        """Retire le client du brouillon."""
        self.client = None
        self.draft.client_id = ""

    # --- Lignes ---

    def add_line(self) -> InvoiceLine:
        """Ajoute une ligne vide (quantité 1, TVA 19 %)."""
        line = InvoiceLine()
        self.draft.lignes.append(line)
        return line

    def remove_line(self, index: int) -> None:
        """Supprime une ligne ; la dernière ligne restante est conservée."""
        if len(self.draft.lignes) <= 1:
            return
        del self.draft.lignes[index]

    def update_line(self, index: int, **changes: object) -> InvoiceLine:
        """Modifie des champs d'une ligne (revalidés par le modèle)."""
        line = self.draft.lignes[index]
        updated = InvoiceLine.model_validate({**line.model_dump(), **changes})
        self.draft.lignes[index] = updated
        return updated

    def select_product(self, index: int, product: Product) -> InvoiceLine:
        """Recopie la désignation, le prix et l'identifiant d'un produit."""
        return self.update_line(
            index,
            produit_id=product.id,
            designation=product.designation,
            prix_unitaire=product.prix_unitaire_ht,
        )

    # --- Options ---

    def change_settings(
        self,
        *,
        tva_active: bool | None = None,
        remise_active: bool | None = None,
        timbre_active: bool | None = None,
        avance_active: bool | None = None,
        devise: Currency | str | None = None,
    ) -> None:
        """Modifie les options du brouillon.

        FR: Désactiver l'avance remet son montant à zéro.
        EN: Disabling the advance resets its amount to zero.
        """
        if tva_active is not None:
            self.draft.tva_active = tva_active
        if remise_active is not None:
            self.draft.remise_active = remise_active
        if timbre_active is not None:
            self.draft.timbre_active = timbre_active
        if devise is not None:
            self.draft.devise = Currency(devise)
        if avance_active is not None:
            self.draft.avance_active = avance_active
            if not avance_active:
                self.draft.avance_montant = Decimal("0")

    def set_advance(self, amount: Number) -> None:
        """Renseigne le montant de l'avance."""
        self.draft.avance_montant = to_decimal(amount)

    def totals(self) -> InvoiceTotals:
        """Totaux du brouillon courant."""
        return self.draft.totals()

    # --- Enregistrement ---

    def validate(self) -> list[str]:
        """Liste les problèmes bloquant l'enregistrement (vide si valide)."""
        errors: list[str] = []
        if not self.draft.client_id:
            errors.append("Veuillez sélectionner un client.")
        for position, line in enumerate(self.draft.lignes, start=1):
            if not line.designation:
                errors.append(f"Ligne {position} : désignation manquante")
            if line.quantite <= 0:
                errors.append(f"Ligne {position} : la quantité doit être positive")
            if line.prix_unitaire <= 0:
                errors.append(f"Ligne {position} : le prix unitaire doit être positif")
        return errors

    async def save(self, store: BaseStore) -> InvoiceRecord:
        """Valide et enregistre le brouillon, puis prépare le suivant.

        FR: Le numéro est attribué à partir des factures présentes dans le
            store au moment de l'enregistrement.
        EN: The number is allocated from the store's invoices at save time.

        Raises:
            InvoiceValidationError: Si le brouillon est incomplet.
        """
        errors = self.validate()
        if errors:
            msg = "Veuillez remplir correctement la facture"
            raise InvoiceValidationError(msg, errors)

        existing = await store.list_invoices()
        self.draft.numero = next_invoice_number(existing, self.today)
        saved = await store.create_invoice(self.draft)
        logger.info("Brouillon enregistré sous le numéro %s", saved.numero)

        self.client = None
        self.draft = self._blank_draft(next_invoice_number([*existing, saved], self.today))
        return saved
