"""Conversion d'un montant en toutes lettres (français).

FR: Écrit un montant en français pour la mention « Arrêtée la présente
    facture à la somme de ». Le montant est arrondi au millième puis séparé
    en partie entière (unité principale de la devise) et partie décimale sur
    trois chiffres (millièmes, quelle que soit la devise).

    Les formes irrégulières sont décrites par table, par chiffre des dizaines :
    - 70-79 et 90-99 se construisent sur « soixante » / « quatre-vingt » + 10..19
    - « et » de liaison pour 21, 31, 41, 51, 61 et 71 (« soixante-et-onze »)
    - « quatre-vingts » prend un s lorsqu'il termine le nombre
    - « cents » prend un s pour les centaines exactes à partir de 200
    Aucune locale système ni bibliothèque n'est utilisée.
EN: Spells an amount in French. Irregular forms are table-driven per tens
    digit. No system locale or library is involved.
"""

from facturation_tn.computation.formatting import round_millimes
from facturation_tn.computation.totals import Number
from facturation_tn.models.enums import Currency

ZERO_WORD = "zéro"

UNITS: tuple[str, ...] = (
    "",
    "un",
    "deux",
    "trois",
    "quatre",
    "cinq",
    "six",
    "sept",
    "huit",
    "neuf",
    "dix",
    "onze",
    "douze",
    "treize",
    "quatorze",
    "quinze",
    "seize",
    "dix-sept",
    "dix-huit",
    "dix-neuf",
)

# Chiffre des dizaines -> (radical, décalage ajouté aux unités, « et un » autorisé,
# pluriel du radical quand les unités sont nulles)
TENS_RULES: dict[int, tuple[str, int, bool, bool]] = {
    2: ("vingt", 0, True, False),
    3: ("trente", 0, True, False),
    4: ("quarante", 0, True, False),
    5: ("cinquante", 0, True, False),
    6: ("soixante", 0, True, False),
    7: ("soixante", 10, True, False),
    8: ("quatre-vingt", 0, False, True),
    9: ("quatre-vingt", 10, False, False),
}

# Échelles au-dessus du millier : (valeur, singulier, pluriel)
_LARGE_SCALES: tuple[tuple[int, str, str], ...] = (
    (1_000_000_000, "milliard", "milliards"),
    (1_000_000, "million", "millions"),
)

# devise -> (unité principale, sous-unité au millième)
CURRENCY_UNITS: dict[str, tuple[str, str]] = {
    Currency.DT: ("dinars", "millimes"),
    Currency.EUR: ("euros", "centimes"),
    Currency.USD: ("dollars", "cents"),
}


def below_hundred(n: int, *, final: bool = True) -> str:
    """Écrit un nombre de 1 à 99.

    Args:
        n: Le nombre à écrire.
        final: Faux lorsque le nombre est suivi de « mille » ; « quatre-vingt »
            reste alors invariable.
    """
    if n < 20:
        return UNITS[n]
    tens, unit = divmod(n, 10)
    stem, offset, links_with_et, plural = TENS_RULES[tens]
    rest = offset + unit
    if rest == 0:
        return stem + "s" if plural and final else stem
    if unit == 1 and links_with_et:
        return f"{stem}-et-{UNITS[rest]}"
    return f"{stem}-{UNITS[rest]}"


def below_thousand(n: int, *, final: bool = True) -> str:
    """Écrit un nombre de 1 à 999 (chaîne vide pour 0)."""
    if n == 0:
        return ""
    hundreds, rest = divmod(n, 100)
    if hundreds == 0:
        return below_hundred(rest, final=final)
    if hundreds == 1:
        head = "cent"
    elif rest == 0 and final:
        head = f"{UNITS[hundreds]} cents"
    else:
        head = f"{UNITS[hundreds]} cent"
    if rest == 0:
        return head
    return f"{head} {below_hundred(rest, final=final)}"


def integer_to_words(n: int) -> str:
    """Écrit un entier positif ou nul en toutes lettres.

    FR: Récursif par tranches de trois chiffres : milliards, millions,
        milliers, puis le reste. Un nombre de milliards supérieur à 999 est
        lui-même écrit récursivement (« mille milliards »).
    EN: Recursive over three-digit groups.
    """
    if n == 0:
        return ZERO_WORD
    parts: list[str] = []
    for value, singular, plural in _LARGE_SCALES:
        count, n = divmod(n, value)
        if count:
            parts.append(f"{integer_to_words(count)} {plural if count > 1 else singular}")
    thousands, n = divmod(n, 1000)
    if thousands == 1:
        parts.append("mille")
    elif thousands:
        parts.append(f"{below_thousand(thousands, final=False)} mille")
    if n:
        parts.append(below_thousand(n))
    return " ".join(parts)


def split_amount(amount: Number) -> tuple[int, int]:
    """Sépare un montant positif en partie entière et millièmes."""
    rounded = round_millimes(amount)
    integer_part = int(rounded)
    return integer_part, int((rounded - integer_part) * 1000)


def amount_to_words(amount: Number, currency: str = Currency.DT) -> str:
    """Écrit un montant et sa devise en toutes lettres.

    Args:
        amount: Le montant (par exemple le total TTC).
        currency: Code devise. Un code inconnu n'ajoute aucun nom d'unité.

    Returns:
        Par exemple ``"deux mille trois cent quatre-vingt-un dinars"`` ;
        exactement ``"zéro"`` pour un montant nul.
    """
    rounded = round_millimes(amount)
    if rounded == 0:
        return ZERO_WORD
    prefix = "moins " if rounded < 0 else ""
    integer_part, fraction = split_amount(rounded.copy_abs())

    words = integer_to_words(integer_part)
    units = CURRENCY_UNITS.get(currency)
    if units is not None:
        major, minor = units
        words += f" {major}"
        if fraction > 0:
            words += f" et {integer_to_words(fraction)} {minor}"
    return prefix + words
