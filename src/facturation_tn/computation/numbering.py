"""Numérotation séquentielle des factures par année civile.

FR: Le numéro suivant est déduit d'un instantané des factures existantes
    (format ``FACT-<année>-<séquence sur 3 chiffres minimum>``). La fonction
    ne réserve rien : deux appels sur le même instantané donnent le même
    numéro. L'appelant sérialise l'attribution et l'enregistrement.
EN: The next number is derived from a snapshot of existing invoices. Nothing
    is reserved: the caller serializes allocation and commit.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from datetime import date

logger = logging.getLogger(__name__)

INVOICE_PREFIX = "FACT"
SEQUENCE_WIDTH = 3

_LEADING_DIGITS_RE = re.compile(r"^\d+")


def year_prefix(year: int) -> str:
    """Préfixe des numéros d'une année, ex. ``FACT-2026-``."""
    return f"{INVOICE_PREFIX}-{year}-"


def _numero_of(record: object) -> str | None:
    if isinstance(record, Mapping):
        numero = record.get("numero")
    else:
        numero = getattr(record, "numero", None)
    return numero if isinstance(numero, str) else None


def parse_sequence(numero: str, prefix: str) -> int | None:
    """Extrait la séquence d'un numéro, ou None si elle n'est pas lisible.

    FR: Seuls les chiffres en tête du suffixe comptent (``"007-bis"`` -> 7).
    EN: Only the suffix's leading digits count.
    """
    match = _LEADING_DIGITS_RE.match(numero[len(prefix):])
    return int(match.group()) if match else None


def next_invoice_number(
    existing_invoices: Iterable[object],
    today: date | None = None,
) -> str:
    """Calcule le numéro de la prochaine facture de l'année en cours.

    Args:
        existing_invoices: Enregistrements exposant ``numero`` (attribut ou
            clé de dictionnaire).
        today: Date de référence pour l'année (par défaut aujourd'hui).

    Returns:
        Le numéro suivant, ex. ``"FACT-2026-008"``. Au-delà de 999 la
        séquence s'élargit simplement (``"FACT-2026-1000"``).
    """
    prefix = year_prefix((today or date.today()).year)

    highest = 0
    for record in existing_invoices:
        numero = _numero_of(record)
        if numero is None or not numero.startswith(prefix):
            continue
        sequence = parse_sequence(numero, prefix)
        if sequence is None:
            logger.debug("Numéro de facture ignoré (séquence illisible) : %s", numero)
            continue
        highest = max(highest, sequence)

    number = f"{prefix}{highest + 1:0{SEQUENCE_WIDTH}d}"
    logger.debug("Prochain numéro de facture : %s", number)
    return number
