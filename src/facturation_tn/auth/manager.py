"""Gestion des sessions authentifiées.

FR: Ouvre une session à jeton opaque après vérification des identifiants,
    résout l'utilisateur d'un jeton et ferme les sessions. Les sessions
    expirent après une durée fixe.
EN: Opens opaque-token sessions after credential verification, resolves the
    user behind a token and closes sessions. Sessions expire after a fixed
    lifetime.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from facturation_tn.auth.base import BaseCredentialVerifier
from facturation_tn.auth.errors import InvalidCredentialsError, SessionNotFoundError
from facturation_tn.auth.models import Session, User
from facturation_tn.models.enums import UserRole

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = timedelta(hours=8)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SessionManager:
    """Gestionnaire de sessions.

    FR: Les sessions sont conservées en mémoire de l'instance ; le
        vérificateur d'identifiants est injecté.
    EN: Sessions are kept in instance memory; the credential verifier is
        injected.

    Args:
        verifier: La source des comptes.
        ttl: Durée de vie d'une session.
        clock: Horloge injectable (tests).
    """

    def __init__(
        self,
        verifier: BaseCredentialVerifier,
        ttl: timedelta = DEFAULT_SESSION_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.verifier = verifier
        self.ttl = ttl
        self._clock = clock
        self._sessions: dict[str, Session] = {}

    def _open(self, user: User) -> Session:
        now = self._clock()
        session = Session(
            token=secrets.token_urlsafe(32),
            user=user,
            created_at=now,
            expires_at=now + self.ttl,
        )
        self._sessions[session.token] = session
        return session

    async def sign_in(self, email: str, password: str) -> Session:
        """Ouvre une session pour des identifiants valides.

        Raises:
            InvalidCredentialsError: Si les identifiants sont refusés.
        """
        try:
            user = await self.verifier.verify(email, password)
        except InvalidCredentialsError:
            logger.warning("Échec de connexion pour %s", email)
            raise
        logger.info("Connexion réussie : %s", user.email)
        return self._open(user)

    async def sign_up(self, email: str, password: str, nom: str) -> Session:
        """Crée un compte standard et ouvre sa session.

        Raises:
            AccountExistsError: Si l'adresse email est déjà utilisée.
        """
        user = await self.verifier.register(email, password, nom)
        return self._open(user)

    def sign_out(self, token: str) -> None:
        """Ferme une session ; un jeton inconnu est ignoré."""
        session = self._sessions.pop(token, None)
        if session is not None:
            logger.info("Déconnexion réussie : %s", session.user.email)

    def get_session(self, token: str) -> Session:
        """Retourne la session active d'un jeton.

        Raises:
            SessionNotFoundError: Si le jeton est inconnu ou la session expirée.
        """
        session = self._sessions.get(token)
        if session is None:
            raise SessionNotFoundError("Session inconnue")
        if session.is_expired(self._clock()):
            del self._sessions[token]
            raise SessionNotFoundError("Session expirée")
        return session

    def get_user(self, token: str) -> User:
        """Retourne l'utilisateur d'une session active."""
        return self.get_session(token).user

    def is_admin(self, token: str) -> bool:
        """Indique si la session appartient à un administrateur."""
        try:
            return self.get_user(token).role == UserRole.ADMIN
        except SessionNotFoundError:
            return False
