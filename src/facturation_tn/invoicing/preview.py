"""Aperçu imprimable d'une facture.

FR: Construit une représentation prête à afficher : montants formatés dans
    la devise de la facture, colonnes remise et TVA selon les options, lignes
    de totaux et montant TTC en toutes lettres.
EN: Builds a display-ready representation: amounts formatted in the invoice
    currency, optional discount and VAT columns, total rows and the total
    amount in French words.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from facturation_tn.computation.formatting import format_amount
from facturation_tn.computation.words import amount_to_words
from facturation_tn.models.catalog import Client, CompanyInfo
from facturation_tn.models.invoice import Invoice

NO_CLIENT_LABEL = "Aucun client sélectionné"
EMPTY_DESIGNATION = "..."
WORDS_SENTENCE = "Arrêtée la présente facture à la somme de : {words}"

DEFAULT_COMPANY = CompanyInfo(
    name="Ma Société SARL",
    address="123 Rue des Entreprises, Tunis, Tunisie",
    phone="+216 71 123 456",
    email="contact@masociete.tn",
    tax_id="TN12345678",
    rib="TN59 1234 5678 9012 3456 7890",
    bank="BANQUE XYZ",
    trade_register="B123456789",
)


class PreviewRow(BaseModel):
    """Ligne du tableau de l'aperçu."""

    designation: str
    quantite: str
    prix_unitaire: str
    remise: str | None = Field(
        default=None,
        description="Remise affichée (colonne optionnelle) / Shown discount",
    )
    tva: str | None = Field(
        default=None,
        description="Taux affiché (colonne optionnelle) / Shown VAT rate",
    )
    total_ht: str


class TotalRow(BaseModel):
    """Ligne du récapitulatif des totaux."""

    label: str
    amount: str
    emphasis: bool = False


class InvoicePreview(BaseModel):
    """Facture mise en forme pour l'impression."""

    title: str = Field(..., description="Titre / Title, ex. « Facture N° FACT-2024-001 »")
    numero: str
    date: str = Field(..., description="Date jj/mm/aaaa / Date dd/mm/yyyy")
    client_lines: list[str] = Field(
        default_factory=list,
        description="Bloc client / Client block",
    )
    issuer_lines: list[str] = Field(
        default_factory=list,
        description="Bloc émetteur / Issuer block",
    )
    columns: list[str]
    rows: list[PreviewRow]
    totals: list[TotalRow]
    amount_in_words: str
    footer: list[str] = Field(default_factory=list, description="Pied de page / Footer")


def _format_number(value: Decimal) -> str:
    """Affiche un nombre sans zéros décimaux superflus (``2.50`` -> ``2.5``)."""
    return format(value.normalize(), "f")


def _client_lines(client: Client | None) -> list[str]:
    if client is None:
        return [NO_CLIENT_LABEL]
    lines = [client.nom, client.adresse, client.telephone, client.email]
    if client.tva:
        lines.append(f"TVA: {client.tva}")
    return [line for line in lines if line]


def _issuer_lines(company: CompanyInfo) -> list[str]:
    lines = [company.name, company.address, company.phone, company.email]
    if company.tax_id:
        lines.append(f"TVA: {company.tax_id}")
    return [line for line in lines if line]


def _footer(company: CompanyInfo) -> list[str]:
    return [
        f"Tél: {company.phone}",
        f"Email: {company.email}",
        f"MF: {company.tax_id}",
        f"RC: {company.trade_register}",
        f"Régime: {company.tax_regime}",
        f"Banque: {company.bank}",
        f"RIB: {company.rib}",
    ]


def build_preview(
    invoice: Invoice,
    client: Client | None = None,
    company: CompanyInfo | None = None,
) -> InvoicePreview:
    """Construit l'aperçu imprimable d'une facture.

    Args:
        invoice: La facture (brouillon ou enregistrée).
        client: Le client à afficher ; à défaut, ``invoice.client`` s'il
            existe (facture lue depuis le store).
        company: L'émetteur (par défaut ``DEFAULT_COMPANY``).

    Returns:
        L'aperçu, avec les colonnes remise et TVA présentes seulement si
        les options correspondantes sont actives.
    """
    company = company or DEFAULT_COMPANY
    client = client or getattr(invoice, "client", None)
    devise = invoice.devise

    columns = ["Désignation", "Qté", "Prix Unitaire"]
    if invoice.remise_active:
        columns.append("Remise (%)")
    if invoice.tva_active:
        columns.append("TVA (%)")
    columns.append("Total HT")

    rows = [
        PreviewRow(
            designation=line.designation or EMPTY_DESIGNATION,
            quantite=_format_number(line.quantite),
            prix_unitaire=format_amount(line.prix_unitaire, devise),
            remise=f"{_format_number(line.remise)}%" if invoice.remise_active else None,
            tva=f"{_format_number(line.tva)}%" if invoice.tva_active else None,
            total_ht=format_amount(line.total_ht, devise),
        )
        for line in invoice.lignes
    ]

    totals = invoice.totals()
    total_rows = [TotalRow(label="Total HT", amount=format_amount(totals.total_ht, devise))]
    if invoice.tva_active:
        total_rows.append(TotalRow(label="TVA", amount=format_amount(totals.total_tva, devise)))
    if invoice.timbre_active:
        total_rows.append(
            TotalRow(label="Timbre fiscal", amount=format_amount(totals.timbre, devise))
        )
    total_rows.append(
        TotalRow(
            label="Total TTC",
            amount=format_amount(totals.total_ttc, devise),
            emphasis=True,
        )
    )
    if invoice.avance_active:
        total_rows.append(
            TotalRow(label="Avance", amount=format_amount(invoice.avance_montant, devise))
        )
        total_rows.append(
            TotalRow(
                label="Reste à payer",
                amount=format_amount(totals.reste_a_payer, devise),
                emphasis=True,
            )
        )

    return InvoicePreview(
        title=f"Facture N° {invoice.numero}",
        numero=invoice.numero,
        date=invoice.date.strftime("%d/%m/%Y"),
        client_lines=_client_lines(client),
        issuer_lines=_issuer_lines(company),
        columns=columns,
        rows=rows,
        totals=total_rows,
        amount_in_words=WORDS_SENTENCE.format(
            words=amount_to_words(totals.total_ttc, devise)
        ),
        footer=_footer(company),
    )
