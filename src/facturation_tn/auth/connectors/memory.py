"""Vérificateur d'identifiants en mémoire pour les tests et le développement.

FR: Les comptes sont ajoutés à l'exécution (aucun compte codé en dur) et les
    mots de passe sont conservés sous forme d'empreinte passlib.
EN: Accounts are added at runtime (no hardcoded account) and passwords are
    kept as passlib hashes.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from passlib.context import CryptContext

from facturation_tn.auth.base import BaseCredentialVerifier
from facturation_tn.auth.errors import AccountExistsError, InvalidCredentialsError
from facturation_tn.auth.models import User
from facturation_tn.models.enums import UserRole

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


@dataclass
class _Account:
    """Compte stocké avec l'empreinte de son mot de passe."""

    user: User
    password_hash: str


class MemoryCredentialVerifier(BaseCredentialVerifier):
    """Vérificateur d'identifiants en mémoire."""

    def __init__(self) -> None:
        self._accounts: dict[str, _Account] = {}

    @staticmethod
    def _key(email: str) -> str:
        return email.strip().lower()

    def add_account(
        self,
        email: str,
        password: str,
        nom: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Ajoute un compte (utilitaire propre au vérificateur mémoire).

        Raises:
            AccountExistsError: Si l'adresse email est déjà utilisée.
        """
        key = self._key(email)
        if key in self._accounts:
            msg = f"Un compte existe déjà pour {email}"
            raise AccountExistsError(msg)
        user = User(id=uuid.uuid4().hex[:13], email=email.strip(), nom=nom, role=role)
        self._accounts[key] = _Account(user=user, password_hash=pwd_context.hash(password))
        return user

    async def verify(self, email: str, password: str) -> User:
        """Vérifie l'email et l'empreinte du mot de passe."""
        account = self._accounts.get(self._key(email))
        if account is None or not pwd_context.verify(password, account.password_hash):
            raise InvalidCredentialsError("Email ou mot de passe incorrect")
        return account.user

    async def register(self, email: str, password: str, nom: str) -> User:
        """Crée un compte utilisateur standard."""
        user = self.add_account(email, password, nom, role=UserRole.USER)
        logger.info("Compte créé avec succès : %s", user.email)
        return user
