"""Formatage des montants pour l'affichage.

FR: Rendu français à trois décimales (précision au millime) pour les trois
    devises acceptées. Le dinar est affiché avec le suffixe « DT » et des
    espaces simples comme séparateur de milliers ; l'euro et le dollar
    suivent le rendu de la locale française (espace fine insécable entre les
    groupes, espace insécable avant le symbole).
EN: French rendering with three decimals for the three accepted currencies.
    The dinar uses a "DT" suffix and plain spaces between digit groups;
    euro and dollar follow the French locale rendering.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from facturation_tn.computation.totals import Number, to_decimal
from facturation_tn.models.enums import Currency

MILLIME = Decimal("0.001")

NARROW_NBSP = "\u202f"
NBSP = "\u00a0"

# devise -> (séparateur de milliers, séparateur avant symbole, symbole)
_CURRENCY_STYLES: dict[str, tuple[str, str, str]] = {
    Currency.DT: (" ", " ", "DT"),
    Currency.EUR: (NARROW_NBSP, NBSP, "€"),
    Currency.USD: (NARROW_NBSP, NBSP, "$US"),
}


def round_millimes(amount: Number) -> Decimal:
    """Arrondit un montant au millième (demi vers le haut).

    La précision du contexte est élargie au nombre de chiffres du montant :
    les très grands montants restent exacts.
    """
    value = to_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(MILLIME, rounding=ROUND_HALF_UP)


def group_digits(digits: str, separator: str) -> str:
    """Regroupe une suite de chiffres par trois depuis la droite."""
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return separator.join(groups)


def format_amount(amount: Number, currency: str = Currency.DT) -> str:
    """Formate un montant et sa devise.

    Args:
        amount: Le montant à afficher.
        currency: Code devise (``DT``, ``EUR`` ou ``USD``). Un code inconnu est
            recopié tel quel après le montant.

    Returns:
        La chaîne affichable, par exemple ``"2 380,000 DT"``.
    """
    group_sep, symbol_sep, symbol = _CURRENCY_STYLES.get(
        currency, (" ", " ", str(currency))
    )
    rounded = round_millimes(amount)
    sign = "-" if rounded < 0 else ""
    integer_part, fraction_part = f"{rounded.copy_abs():f}".split(".")
    number = f"{sign}{group_digits(integer_part, group_sep)},{fraction_part}"
    return f"{number}{symbol_sep}{symbol}"
