"""Modèles principaux pour les factures.

FR: Modèles Pydantic pour les factures et leurs lignes. Les totaux sont des
    champs calculés : ils sont recalculés à chaque accès à partir des lignes
    et des options, et une valeur fournie par l'appelant est ignorée.
EN: Pydantic models for invoices and invoice lines. Totals are computed
    fields, recomputed on every access; caller-supplied values are ignored.
"""

import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, computed_field

from facturation_tn.computation.totals import (
    InvoiceTotals,
    compute_totals,
    fiscal_stamp,
    invoice_subtotal,
    invoice_tax,
    line_total,
    remainder_due,
)
from facturation_tn.models.catalog import Client
from facturation_tn.models.enums import Currency

DEFAULT_VAT_RATE = Decimal("19")
"""Taux de TVA proposé pour une nouvelle ligne / Default VAT rate."""


class InvoiceLine(BaseModel):
    """Ligne de facture.

    FR: Poste de facturation avec quantité, prix unitaire HT, remise et taux
        de TVA propres à la ligne.
    EN: Invoice item with its own quantity, unit price, discount and VAT rate.
    """

    id: str | None = Field(default=None, description="Identifiant / Identifier")
    facture_id: str | None = Field(
        default=None,
        description="Facture parente / Parent invoice identifier",
    )
    produit_id: str | None = Field(
        default=None,
        description="Produit du catalogue / Catalog product identifier",
    )
    designation: str = Field(default="", description="Désignation / Item description")
    quantite: Decimal = Field(
        default=Decimal("1"),
        description="Quantité facturée / Invoiced quantity",
    )
    prix_unitaire: Decimal = Field(
        default=Decimal("0"),
        description="Prix unitaire HT / Unit price excl. tax",
    )
    remise: Decimal = Field(
        default=Decimal("0"),
        description="Remise en % (non bornée) / Discount in % (not clamped)",
    )
    tva: Decimal = Field(
        default=DEFAULT_VAT_RATE,
        description="Taux de TVA en % / VAT rate in %",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_ht(self) -> Decimal:
        """Montant total HT de la ligne après remise / Line total excl. tax."""
        return line_total(self.quantite, self.prix_unitaire, self.remise)


class Invoice(BaseModel):
    """Facture.

    FR: En-tête, options et lignes ordonnées. Les options TVA, timbre et
        avance pilotent le calcul des totaux ; ``remise_active`` ne concerne
        que l'affichage de la colonne remise (les remises s'appliquent
        toujours).
    EN: Header, options and ordered lines. ``remise_active`` only affects
        the display of the discount column.
    """

    # --- Identification ---
    id: str | None = Field(default=None, description="Identifiant / Identifier")
    numero: str = Field(default="", description="Numéro de facture / Invoice number")
    date: datetime.date = Field(
        default_factory=datetime.date.today,
        description="Date d'émission / Issue date",
    )
    client_id: str = Field(default="", description="Client facturé / Billed client")
    devise: Currency = Field(default=Currency.DT, description="Devise / Currency")

    # --- Options ---
    tva_active: bool = Field(default=True, description="TVA appliquée / VAT applied")
    remise_active: bool = Field(
        default=True,
        description="Colonne remise affichée / Discount column shown",
    )
    timbre_active: bool = Field(
        default=True,
        description="Timbre fiscal appliqué / Stamp duty applied",
    )
    avance_active: bool = Field(
        default=False,
        description="Avance enregistrée / Advance payment recorded",
    )
    avance_montant: Decimal = Field(
        default=Decimal("0"),
        description="Montant de l'avance / Advance payment amount",
    )

    # --- Lignes ---
    lignes: list[InvoiceLine] = Field(
        default_factory=list,
        description="Lignes de facture / Invoice lines",
    )

    # --- Totaux calculés ---

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_ht(self) -> Decimal:
        """Total HT de la facture / Invoice total excluding tax."""
        return invoice_subtotal(self.lignes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_tva(self) -> Decimal:
        """Total TVA (zéro si la TVA est désactivée) / Invoice total VAT."""
        return invoice_tax(self.lignes, self.tva_active)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def timbre(self) -> Decimal:
        """Timbre fiscal / Stamp duty."""
        return fiscal_stamp(self.timbre_active)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_ttc(self) -> Decimal:
        """Total TTC (HT + TVA + timbre) / Invoice total including tax."""
        return self.total_ht + self.total_tva + self.timbre

    @computed_field  # type: ignore[prop-decorator]
    @property
    def reste_a_payer(self) -> Decimal:
        """Reste à payer après avance, jamais négatif / Amount due."""
        return remainder_due(self.total_ttc, self.avance_active, self.avance_montant)

    def totals(self) -> InvoiceTotals:
        """Recalcule l'ensemble des totaux en un seul passage sur les lignes."""
        return compute_totals(
            self.lignes,
            tva_active=self.tva_active,
            timbre_active=self.timbre_active,
            avance_active=self.avance_active,
            avance_montant=self.avance_montant,
        )


class InvoiceRecord(Invoice):
    """Facture lue depuis le store, avec son client résolu.

    FR: Le client est résolu en lecture ; il n'est jamais persisté avec la
        facture.
    EN: The client is resolved on read and never stored with the invoice.
    """

    client: Client | None = Field(
        default=None,
        description="Client résolu (lecture) / Resolved client (read side)",
    )
