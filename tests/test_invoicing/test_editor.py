"""Tests de l'éditeur de brouillon de facture."""

from decimal import Decimal

import pytest

from facturation_tn.invoicing.editor import InvoiceEditor, search_clients, search_products
from facturation_tn.invoicing.errors import InvoiceValidationError
from facturation_tn.models.catalog import Client, Product
from facturation_tn.models.enums import Currency
from facturation_tn.storage.connectors.memory import MemoryStore


class TestDraftDefaults:
    """Valeurs initiales du brouillon."""

    def test_number_from_existing(self, today) -> None:
        editor = InvoiceEditor([{"numero": "FACT-2024-004"}], today=today)
        assert editor.draft.numero == "FACT-2024-005"

    def test_first_number(self, editor: InvoiceEditor) -> None:
        assert editor.draft.numero == "FACT-2024-001"

    def test_options(self, editor: InvoiceEditor) -> None:
        draft = editor.draft
        assert draft.devise == Currency.DT
        assert draft.tva_active
        assert draft.remise_active
        assert draft.timbre_active
        assert not draft.avance_active
        assert draft.avance_montant == 0

    def test_one_empty_line(self, editor: InvoiceEditor) -> None:
        [line] = editor.draft.lignes
        assert line.quantite == 1
        assert line.prix_unitaire == 0
        assert line.remise == 0
        assert line.tva == Decimal("19")
        assert line.designation == ""


class TestClientSelection:
    """Tests de select_client() et clear_client()."""

    def test_select(self, editor: InvoiceEditor, client: Client) -> None:
        editor.select_client(client)
        assert editor.draft.client_id == "1"
        assert editor.client is client

    def test_clear(self, editor: InvoiceEditor, client: Client) -> None:
        editor.select_client(client)
        editor.clear_client()
        assert editor.draft.client_id == ""
        assert editor.client is None


class TestLines:
    """Tests d'édition des lignes."""

    def test_add_line(self, editor: InvoiceEditor) -> None:
        editor.add_line()
        assert len(editor.draft.lignes) == 2

    def test_remove_line(self, editor: InvoiceEditor) -> None:
        editor.add_line()
        editor.update_line(1, designation="Deuxième")
        editor.remove_line(0)
        assert [line.designation for line in editor.draft.lignes] == ["Deuxième"]

    def test_last_line_is_kept(self, editor: InvoiceEditor) -> None:
        editor.remove_line(0)
        assert len(editor.draft.lignes) == 1

    def test_update_line_recomputes_total(self, editor: InvoiceEditor) -> None:
        line = editor.update_line(0, quantite="3", prix_unitaire="100", remise="10")
        assert line.total_ht == Decimal("270")
        assert editor.draft.total_ht == Decimal("270")

    def test_select_product_copies_fields(self, editor: InvoiceEditor, product: Product) -> None:
        editor.update_line(0, quantite=2)
        line = editor.select_product(0, product)
        assert line.produit_id == "3"
        assert line.designation == "Développement Web"
        assert line.prix_unitaire == Decimal("2000")
        assert line.quantite == 2
        assert line.total_ht == Decimal("4000")


class TestSettings:
    """Tests de change_settings() et set_advance()."""

    def test_toggle_options(self, editor: InvoiceEditor) -> None:
        editor.change_settings(tva_active=False, timbre_active=False, devise="EUR")
        assert not editor.draft.tva_active
        assert not editor.draft.timbre_active
        assert editor.draft.devise == Currency.EUR
        assert editor.draft.remise_active

    def test_disabling_advance_resets_amount(self, editor: InvoiceEditor) -> None:
        editor.change_settings(avance_active=True)
        editor.set_advance("500")
        assert editor.draft.avance_montant == Decimal("500")
        editor.change_settings(avance_active=False)
        assert editor.draft.avance_montant == 0

    def test_other_changes_keep_advance(self, editor: InvoiceEditor) -> None:
        editor.change_settings(avance_active=True)
        editor.set_advance(500)
        editor.change_settings(tva_active=False)
        assert editor.draft.avance_montant == Decimal("500")

    def test_unknown_currency_rejected(self, editor: InvoiceEditor) -> None:
        with pytest.raises(ValueError):
            editor.change_settings(devise="GBP")

    def test_totals(self, editor: InvoiceEditor, product: Product) -> None:
        editor.select_product(0, product)
        editor.change_settings(avance_active=True)
        editor.set_advance(381)
        totals = editor.totals()
        assert totals.total_ttc == Decimal("2381")
        assert totals.reste_a_payer == Decimal("2000")


class TestValidate:
    """Tests de validate()."""

    def test_empty_draft(self, editor: InvoiceEditor) -> None:
        errors = editor.validate()
        assert "Veuillez sélectionner un client." in errors
        assert any("désignation" in e for e in errors)
        assert any("prix unitaire" in e for e in errors)

    def test_zero_quantity(self, editor: InvoiceEditor, client: Client, product: Product) -> None:
        editor.select_client(client)
        editor.select_product(0, product)
        editor.update_line(0, quantite=0)
        assert editor.validate() == ["Ligne 1 : la quantité doit être positive"]

    def test_valid_draft(self, editor: InvoiceEditor, client: Client, product: Product) -> None:
        editor.select_client(client)
        editor.select_product(0, product)
        assert editor.validate() == []


class TestSave:
    """Tests de save()."""

    async def test_invalid_draft_raises(self, editor: InvoiceEditor, store: MemoryStore) -> None:
        with pytest.raises(InvoiceValidationError) as exc_info:
            await editor.save(store)
        assert "Veuillez sélectionner un client." in exc_info.value.errors
        assert len(await store.list_invoices()) == 1

    async def test_saves_and_resets(
        self, editor: InvoiceEditor, store: MemoryStore, client: Client, product: Product
    ) -> None:
        editor.select_client(client)
        editor.select_product(0, product)
        saved = await editor.save(store)

        assert saved.numero == "FACT-2024-001"
        assert saved.total_ttc == Decimal("2381")
        assert saved.client.nom == "Société Example"
        assert await store.get_invoice(saved.id) is not None

        assert editor.draft.numero == "FACT-2024-002"
        assert editor.draft.client_id == ""
        assert editor.client is None
        assert len(editor.draft.lignes) == 1
        assert editor.draft.lignes[0].designation == ""

    async def test_number_allocated_at_save_time(
        self, editor: InvoiceEditor, store: MemoryStore, client: Client, product: Product
    ) -> None:
        """Une facture enregistrée entre-temps décale le numéro attribué."""
        other = InvoiceEditor(today=editor.today)
        for e in (other, editor):
            e.select_client(client)
            e.select_product(0, product)
        await other.save(store)
        saved = await editor.save(store)
        assert saved.numero == "FACT-2024-002"


class TestSearch:
    """Tests de search_clients() et search_products()."""

    def test_short_query_returns_nothing(self, client: Client) -> None:
        assert search_clients([client], "s") == []

    def test_client_by_name_or_email(self, client: Client) -> None:
        assert search_clients([client], "EXAMPLE") == [client]
        assert search_clients([client], "contact@") == [client]
        assert search_clients([client], "inconnu") == []

    def test_product_by_designation(self, product: Product) -> None:
        assert search_products([product], "dével") == [product]
        assert search_products([product], "web") == [product]
