"""Configuration de la facturation via settings Django.

FR: Helper pour accéder aux paramètres FACTURATION_TN définis dans
    settings.py. Fournit des valeurs par défaut, l'instanciation dynamique
    du store et les coordonnées de l'émetteur.
EN: Helper for accessing FACTURATION_TN settings defined in settings.py.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

from facturation_tn.invoicing.preview import DEFAULT_COMPANY
from facturation_tn.models.catalog import CompanyInfo
from facturation_tn.models.enums import Currency
from facturation_tn.storage.base import BaseStore

logger = logging.getLogger(__name__)

DEFAULTS: dict[str, object] = {
    "STORE_CLASS": "facturation_tn.storage.connectors.memory.MemoryStore",
    "DEFAULT_CURRENCY": Currency.DT.value,
    "COMPANY": None,
}


def get_setting(name: str) -> object:
    """Retourne la valeur d'un paramètre FACTURATION_TN.

    FR: Cherche dans settings.FACTURATION_TN[name], puis dans les défauts.
    EN: Looks up settings.FACTURATION_TN[name], then falls back to defaults.
    """
    if name not in DEFAULTS:
        msg = f"Paramètre FACTURATION_TN inconnu : {name}"
        raise KeyError(msg)
    user_settings = getattr(settings, "FACTURATION_TN", {})
    return user_settings.get(name, DEFAULTS[name])


@lru_cache(maxsize=None)
def load_store(class_path: str) -> BaseStore:
    """Instancie un store une seule fois par chemin.

    FR: Le chemin désigne une classe de store ou une fabrique sans argument
        (par exemple ``facturation_tn.storage.fixtures.demo_store``).
    EN: The path names a store class or a zero-argument factory.

    Raises:
        TypeError: Si l'objet construit n'est pas un ``BaseStore``.
    """
    factory = import_string(class_path)
    store = factory()
    if not isinstance(store, BaseStore):
        msg = f"{class_path} ne construit pas un BaseStore"
        raise TypeError(msg)
    logger.info("Store de facturation initialisé : %s", class_path)
    return store


def get_store_instance() -> BaseStore:
    """Retourne le store configuré (STORE_CLASS).

    Raises:
        ValueError: Si STORE_CLASS est vide.
    """
    class_path = get_setting("STORE_CLASS")
    if not class_path:
        msg = (
            "FACTURATION_TN['STORE_CLASS'] n'est pas configuré. "
            "Spécifiez le chemin complet de la classe de store."
        )
        raise ValueError(msg)
    return load_store(str(class_path))


def get_company() -> CompanyInfo:
    """Coordonnées de l'émetteur (COMPANY), ou l'émetteur par défaut."""
    company = get_setting("COMPANY")
    if not company:
        return DEFAULT_COMPANY
    return CompanyInfo.model_validate(company)


def get_default_currency() -> Currency:
    """Devise utilisée quand une requête n'en précise pas."""
    return Currency(get_setting("DEFAULT_CURRENCY"))
