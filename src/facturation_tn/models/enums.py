"""Énumérations pour la facturation.

FR: Devises acceptées sur les factures et rôles des comptes utilisateurs.
EN: Currencies accepted on invoices and user account roles.
"""

from enum import StrEnum


class Currency(StrEnum):
    """Devise d'une facture.

    FR: Le dinar tunisien est la devise locale (affiché « DT », trois
        décimales). L'euro et le dollar américain sont les devises étrangères
        acceptées.
    EN: The Tunisian dinar is the local currency (shown as "DT", three
        decimals). Euro and US dollar are the accepted foreign currencies.
    """

    DT = "DT"
    """Dinar tunisien / Tunisian dinar"""

    EUR = "EUR"
    """Euro"""

    USD = "USD"
    """Dollar américain / US Dollar"""


class UserRole(StrEnum):
    """Rôle d'un compte utilisateur.

    FR: Les administrateurs accèdent à la gestion du catalogue.
    EN: Administrators can manage the catalog.
    """

    ADMIN = "admin"
    """Administrateur / Administrator"""

    USER = "user"
    """Utilisateur standard / Standard user"""
