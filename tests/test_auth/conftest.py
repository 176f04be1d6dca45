"""Fixtures partagées pour les tests d'authentification."""

from datetime import UTC, datetime

import pytest

from facturation_tn.auth.connectors.memory import MemoryCredentialVerifier
from facturation_tn.auth.manager import SessionManager
from facturation_tn.models.enums import UserRole


class FakeClock:
    """Horloge contrôlable pour tester l'expiration des sessions."""

    def __init__(self) -> None:
        self.now = datetime(2024, 3, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def verifier() -> MemoryCredentialVerifier:
    """Vérificateur avec un administrateur et un utilisateur."""
    verifier = MemoryCredentialVerifier()
    verifier.add_account("admin@facturation.tn", "admin-secret", "Admin", role=UserRole.ADMIN)
    verifier.add_account("user@facturation.tn", "user-secret", "Utilisateur")
    return verifier


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def manager(verifier: MemoryCredentialVerifier, clock: FakeClock) -> SessionManager:
    """Gestionnaire de sessions à horloge contrôlée."""
    return SessionManager(verifier, clock=clock)
