"""Calculs monétaires des lignes et des totaux de facture.

FR: Fonctions pures (aucun effet de bord, aucune validation) dérivant le total
    HT d'une ligne, la TVA ligne par ligne, le timbre fiscal, le total TTC et
    le reste à payer après avance. Chaque total est recalculé à partir de la
    collection complète des lignes, jamais mis à jour incrémentalement.
    Aucun arrondi n'est appliqué ici : l'arrondi au millime est fait à
    l'affichage.
EN: Pure functions (no side effects, no validation) deriving line totals,
    per-line VAT, the fiscal stamp, the total incl. tax and the remainder due
    after an advance payment. Rounding happens at display time only.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from pydantic import BaseModel, Field

Number = Decimal | int | float | str

STAMP_DUTY = Decimal("1")
"""Timbre fiscal fixe, en unités de la devise / Fixed stamp duty."""

_HUNDRED = Decimal("100")
_ZERO = Decimal("0")


def to_decimal(value: Number) -> Decimal:
    """Convertit un nombre en Decimal sans passer par la représentation binaire."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _line_field(line: object, name: str) -> Number:
    if isinstance(line, Mapping):
        return line.get(name, 0)
    return getattr(line, name)


class InvoiceTotals(BaseModel):
    """Totaux dérivés d'une facture.

    FR: Résultat d'un recalcul complet à partir des lignes et des options.
    EN: Result of a full recomputation from the lines and the options.
    """

    total_ht: Decimal = Field(..., description="Total HT / Total excl. tax")
    total_tva: Decimal = Field(..., description="Total TVA / Total VAT")
    timbre: Decimal = Field(..., description="Timbre fiscal / Stamp duty")
    total_ttc: Decimal = Field(..., description="Total TTC / Total incl. tax")
    reste_a_payer: Decimal = Field(..., description="Reste à payer / Amount due")


def line_total(
    quantity: Number,
    unit_price: Number,
    discount_percent: Number = 0,
) -> Decimal:
    """Total HT d'une ligne après remise.

    FR: ``quantité × prix unitaire × (1 - remise/100)``. Une remise hors de
        [0, 100] n'est pas bornée.
    EN: ``quantity × unit price × (1 - discount/100)``. A discount outside
        [0, 100] is not clamped.
    """
    discount = to_decimal(discount_percent)
    return to_decimal(quantity) * to_decimal(unit_price) * (1 - discount / _HUNDRED)


def line_total_with_tax(
    quantity: Number,
    unit_price: Number,
    discount_percent: Number = 0,
    tax_percent: Number = 0,
) -> Decimal:
    """Total TTC d'une ligne / Line total including tax."""
    total = line_total(quantity, unit_price, discount_percent)
    return total * (1 + to_decimal(tax_percent) / _HUNDRED)


def invoice_subtotal(lines: Iterable[object]) -> Decimal:
    """Total HT de la facture (somme des totaux HT des lignes)."""
    return sum(
        (
            line_total(
                _line_field(line, "quantite"),
                _line_field(line, "prix_unitaire"),
                _line_field(line, "remise"),
            )
            for line in lines
        ),
        _ZERO,
    )


def invoice_tax(lines: Iterable[object], tax_enabled: bool = True) -> Decimal:
    """Total TVA de la facture.

    FR: Chaque ligne est taxée à son propre taux sur son propre total HT
        remisé. Si la TVA est désactivée, le résultat vaut exactement zéro
        quels que soient les taux des lignes.
    EN: Each line is taxed at its own rate on its own discounted subtotal.
        When VAT is disabled the result is exactly zero.
    """
    if not tax_enabled:
        return _ZERO
    return sum(
        (
            line_total(
                _line_field(line, "quantite"),
                _line_field(line, "prix_unitaire"),
                _line_field(line, "remise"),
            )
            * to_decimal(_line_field(line, "tva"))
            / _HUNDRED
            for line in lines
        ),
        _ZERO,
    )


def fiscal_stamp(stamp_enabled: bool = False) -> Decimal:
    """Timbre fiscal : montant fixe si activé, zéro sinon."""
    return STAMP_DUTY if stamp_enabled else _ZERO


def remainder_due(
    total_ttc: Number,
    advance_enabled: bool = False,
    advance_amount: Number = 0,
) -> Decimal:
    """Reste à payer après avance.

    FR: Sans avance, le total TTC est retourné tel quel. Avec avance, le
        résultat n'est jamais négatif : un trop-perçu donne zéro. Une avance
        négative compte pour zéro.
    EN: Without an advance the total is returned unchanged. With an advance
        the result is never negative: an overpayment yields zero. A negative
        advance counts as zero.
    """
    total = to_decimal(total_ttc)
    if not advance_enabled:
        return total
    advance = max(_ZERO, to_decimal(advance_amount))
    return max(_ZERO, total - advance)


def compute_totals(
    lines: Iterable[object],
    *,
    tva_active: bool = True,
    timbre_active: bool = False,
    avance_active: bool = False,
    avance_montant: Number = 0,
) -> InvoiceTotals:
    """Recalcule tous les totaux d'une facture en un appel."""
    lines = list(lines)
    total_ht = invoice_subtotal(lines)
    total_tva = invoice_tax(lines, tva_active)
    timbre = fiscal_stamp(timbre_active)
    total_ttc = total_ht + total_tva + timbre
    return InvoiceTotals(
        total_ht=total_ht,
        total_tva=total_tva,
        timbre=timbre,
        total_ttc=total_ttc,
        reste_a_payer=remainder_due(total_ttc, avance_active, avance_montant),
    )
