"""Points d'entrée CLI pour facturation-tn."""

import argparse
import logging
from decimal import Decimal, InvalidOperation

from facturation_tn.computation.formatting import format_amount
from facturation_tn.computation.numbering import next_invoice_number
from facturation_tn.computation.words import amount_to_words
from facturation_tn.models.enums import Currency


def _amount_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("amount", help="Montant, ex. 2381.5")
    parser.add_argument(
        "--currency",
        "-c",
        default=Currency.DT.value,
        choices=[c.value for c in Currency],
        help="Devise (défaut : DT)",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def _parse_amount(parser: argparse.ArgumentParser, raw: str) -> Decimal:
    try:
        amount = Decimal(raw.replace(",", "."))
    except InvalidOperation:
        amount = None
    if amount is None or not amount.is_finite():
        parser.error(f"montant invalide : {raw}")
    return amount


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def words(argv: list[str] | None = None) -> None:
    """Point d'entrée pour la commande `facturation-words`."""
    parser = _amount_parser("facturation-words", "Écrit un montant en toutes lettres.")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    print(amount_to_words(_parse_amount(parser, args.amount), args.currency))


def format_amount_command(argv: list[str] | None = None) -> None:
    """Point d'entrée pour la commande `facturation-format`."""
    parser = _amount_parser("facturation-format", "Formate un montant dans une devise.")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    print(format_amount(_parse_amount(parser, args.amount), args.currency))


def next_number(argv: list[str] | None = None) -> None:
    """Point d'entrée pour la commande `facturation-next-number`."""
    parser = argparse.ArgumentParser(
        prog="facturation-next-number",
        description="Calcule le prochain numéro de facture de l'année.",
    )
    parser.add_argument("numeros", nargs="*", help="Numéros existants")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    print(next_invoice_number({"numero": n} for n in args.numeros))
