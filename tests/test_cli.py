"""Tests des points d'entrée CLI."""

from datetime import date

import pytest

from facturation_tn.cli import format_amount_command, next_number, words


class TestWords:
    """Tests de `facturation-words`."""

    def test_dinars_by_default(self, capsys) -> None:
        words(["2381"])
        assert capsys.readouterr().out == "deux mille trois cent quatre-vingt-un dinars\n"

    def test_currency_option(self, capsys) -> None:
        words(["71", "--currency", "EUR"])
        assert capsys.readouterr().out == "soixante-et-onze euros\n"

    def test_comma_decimal_separator(self, capsys) -> None:
        words(["0,5"])
        assert capsys.readouterr().out == "zéro dinars et cinq cents millimes\n"

    def test_invalid_amount_exits(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            words(["douze"])
        assert exc_info.value.code == 2
        assert "montant invalide" in capsys.readouterr().err

    def test_unknown_currency_exits(self) -> None:
        with pytest.raises(SystemExit):
            words(["12", "--currency", "GBP"])


class TestFormat:
    """Tests de `facturation-format`."""

    def test_dinars(self, capsys) -> None:
        format_amount_command(["2380"])
        assert capsys.readouterr().out == "2 380,000 DT\n"

    def test_infinite_amount_exits(self) -> None:
        with pytest.raises(SystemExit):
            format_amount_command(["Infinity"])


class TestNextNumber:
    """Tests de `facturation-next-number`."""

    def test_without_existing(self, capsys) -> None:
        next_number([])
        assert capsys.readouterr().out == f"FACT-{date.today().year}-001\n"

    def test_with_existing(self, capsys) -> None:
        year = date.today().year
        next_number([f"FACT-{year}-001", f"FACT-{year}-007", "FACT-1999-050"])
        assert capsys.readouterr().out == f"FACT-{year}-008\n"

    def test_verbose_logs_allocation(self, capsys, caplog) -> None:
        with caplog.at_level("DEBUG", logger="facturation_tn.computation.numbering"):
            next_number(["--verbose"])
        assert "Prochain numéro de facture" in caplog.text
