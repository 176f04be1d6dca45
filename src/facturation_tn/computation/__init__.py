"""Calculs de facturation : totaux, formatage, montant en lettres, numérotation.

FR: Fonctions pures, sans état partagé, appelables depuis n'importe quel
    contexte d'exécution.
EN: Pure functions with no shared state.
"""

from facturation_tn.computation.formatting import format_amount
from facturation_tn.computation.numbering import next_invoice_number
from facturation_tn.computation.totals import (
    STAMP_DUTY,
    InvoiceTotals,
    compute_totals,
    fiscal_stamp,
    invoice_subtotal,
    invoice_tax,
    line_total,
    line_total_with_tax,
    remainder_due,
)
from facturation_tn.computation.words import amount_to_words

__all__ = [
    "STAMP_DUTY",
    "InvoiceTotals",
    "amount_to_words",
    "compute_totals",
    "fiscal_stamp",
    "format_amount",
    "invoice_subtotal",
    "invoice_tax",
    "line_total",
    "line_total_with_tax",
    "next_invoice_number",
    "remainder_due",
]
