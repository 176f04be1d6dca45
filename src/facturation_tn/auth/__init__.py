"""Authentification : vérification des identifiants et sessions.

FR: Interface de vérification injectable, connecteur en mémoire et
    gestionnaire de sessions à jeton.
EN: Injectable credential verification, in-memory connector and token
    session manager.
"""

from facturation_tn.auth.base import BaseCredentialVerifier
from facturation_tn.auth.connectors.memory import MemoryCredentialVerifier
from facturation_tn.auth.errors import (
    AccountExistsError,
    AuthError,
    InvalidCredentialsError,
    SessionNotFoundError,
)
from facturation_tn.auth.manager import SessionManager
from facturation_tn.auth.models import Session, User

__all__ = [
    "AccountExistsError",
    "AuthError",
    "BaseCredentialVerifier",
    "InvalidCredentialsError",
    "MemoryCredentialVerifier",
    "Session",
    "SessionManager",
    "SessionNotFoundError",
    "User",
]
