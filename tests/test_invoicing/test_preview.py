"""Tests de l'aperçu imprimable."""

from datetime import date
from decimal import Decimal

import pytest

from facturation_tn.computation.formatting import NARROW_NBSP, NBSP
from facturation_tn.invoicing.preview import DEFAULT_COMPANY, InvoicePreview, build_preview
from facturation_tn.models.catalog import Client, CompanyInfo
from facturation_tn.models.invoice import Invoice, InvoiceLine
from facturation_tn.storage.connectors.memory import MemoryStore


@pytest.fixture
def invoice() -> Invoice:
    """Facture de référence : 1 x 2000, TVA 19 %, timbre."""
    return Invoice(
        numero="FACT-2024-001",
        date=date(2024, 3, 1),
        client_id="1",
        lignes=[
            InvoiceLine(
                designation="Développement Web",
                quantite=Decimal("1"),
                prix_unitaire=Decimal("2000"),
                remise=Decimal("0"),
                tva=Decimal("19"),
            )
        ],
    )


class TestHeader:
    """En-tête et blocs client / émetteur."""

    def test_number_and_date(self, invoice: Invoice) -> None:
        preview = build_preview(invoice)
        assert isinstance(preview, InvoicePreview)
        assert preview.title == "Facture N° FACT-2024-001"
        assert preview.date == "01/03/2024"

    def test_client_block(self, invoice: Invoice, client: Client) -> None:
        preview = build_preview(invoice, client)
        assert preview.client_lines[0] == "Société Example"
        assert "TVA: TN1234567" in preview.client_lines

    def test_without_client(self, invoice: Invoice) -> None:
        assert build_preview(invoice).client_lines == ["Aucun client sélectionné"]

    async def test_client_resolved_from_record(self, invoice: Invoice, store: MemoryStore) -> None:
        record = await store.create_invoice(invoice)
        assert build_preview(record).client_lines[0] == "Société Example"

    def test_default_issuer(self, invoice: Invoice) -> None:
        preview = build_preview(invoice)
        assert preview.issuer_lines[0] == DEFAULT_COMPANY.name
        assert "RIB: TN59 1234 5678 9012 3456 7890" in preview.footer

    def test_custom_issuer(self, invoice: Invoice) -> None:
        company = CompanyInfo(name="Atelier Carthage", tax_id="TN0001112", tax_regime="Forfaitaire")
        preview = build_preview(invoice, company=company)
        assert preview.issuer_lines == ["Atelier Carthage", "TVA: TN0001112"]
        assert "Régime: Forfaitaire" in preview.footer


class TestRows:
    """Colonnes et lignes du tableau."""

    def test_all_columns(self, invoice: Invoice) -> None:
        preview = build_preview(invoice)
        assert preview.columns == [
            "Désignation",
            "Qté",
            "Prix Unitaire",
            "Remise (%)",
            "TVA (%)",
            "Total HT",
        ]
        [row] = preview.rows
        assert row.designation == "Développement Web"
        assert row.quantite == "1"
        assert row.prix_unitaire == "2 000,000 DT"
        assert row.remise == "0%"
        assert row.tva == "19%"
        assert row.total_ht == "2 000,000 DT"

    def test_discount_column_hidden(self, invoice: Invoice) -> None:
        invoice.remise_active = False
        preview = build_preview(invoice)
        assert "Remise (%)" not in preview.columns
        assert preview.rows[0].remise is None

    def test_discount_still_applied_when_hidden(self, invoice: Invoice) -> None:
        invoice.lignes[0].remise = Decimal("10")
        invoice.remise_active = False
        preview = build_preview(invoice)
        assert preview.rows[0].total_ht == "1 800,000 DT"

    def test_tax_column_hidden(self, invoice: Invoice) -> None:
        invoice.tva_active = False
        preview = build_preview(invoice)
        assert "TVA (%)" not in preview.columns
        assert preview.rows[0].tva is None

    def test_empty_designation_placeholder(self, invoice: Invoice) -> None:
        invoice.lignes.append(InvoiceLine(quantite=Decimal("2.50")))
        preview = build_preview(invoice)
        assert preview.rows[1].designation == "..."
        assert preview.rows[1].quantite == "2.5"

    def test_currency_follows_invoice(self, invoice: Invoice) -> None:
        invoice.devise = "EUR"
        preview = build_preview(invoice)
        assert preview.rows[0].prix_unitaire == f"2{NARROW_NBSP}000,000{NBSP}€"


class TestTotals:
    """Récapitulatif des totaux et montant en lettres."""

    def test_reference_totals(self, invoice: Invoice) -> None:
        preview = build_preview(invoice)
        assert [(row.label, row.amount) for row in preview.totals] == [
            ("Total HT", "2 000,000 DT"),
            ("TVA", "380,000 DT"),
            ("Timbre fiscal", "1,000 DT"),
            ("Total TTC", "2 381,000 DT"),
        ]

    def test_words_sentence(self, invoice: Invoice) -> None:
        preview = build_preview(invoice)
        assert preview.amount_in_words == (
            "Arrêtée la présente facture à la somme de : "
            "deux mille trois cent quatre-vingt-un dinars"
        )

    def test_advance_rows(self, invoice: Invoice) -> None:
        invoice.avance_active = True
        invoice.avance_montant = Decimal("381")
        labels = {row.label: row.amount for row in build_preview(invoice).totals}
        assert labels["Avance"] == "381,000 DT"
        assert labels["Reste à payer"] == "2 000,000 DT"

    def test_optional_rows_hidden(self, invoice: Invoice) -> None:
        invoice.tva_active = False
        invoice.timbre_active = False
        labels = [row.label for row in build_preview(invoice).totals]
        assert labels == ["Total HT", "Total TTC"]
