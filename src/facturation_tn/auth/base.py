"""Interface abstraite pour la vérification des identifiants.

FR: Découple la gestion des sessions de la source des comptes (mémoire,
    base de données, fournisseur d'identité externe).
EN: Decouples session handling from the account source.
"""

from abc import ABCMeta, abstractmethod

from facturation_tn.auth.models import User


class BaseCredentialVerifier(metaclass=ABCMeta):
    """Classe de base abstraite pour les vérificateurs d'identifiants."""

    @abstractmethod
    async def verify(self, email: str, password: str) -> User:
        """Vérifie un couple email / mot de passe.

        Args:
            email: L'adresse email du compte.
            password: Le mot de passe en clair.

        Returns:
            Le compte authentifié.

        Raises:
            InvalidCredentialsError: Si le compte est inconnu ou le mot de
                passe incorrect.
        """
        ...

    @abstractmethod
    async def register(self, email: str, password: str, nom: str) -> User:
        """Crée un compte utilisateur standard.

        Raises:
            AccountExistsError: Si l'adresse email est déjà utilisée.
        """
        ...
