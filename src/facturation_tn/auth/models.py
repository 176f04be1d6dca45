"""Modèles pour les comptes utilisateurs et les sessions."""

from datetime import datetime

from pydantic import BaseModel, Field

from facturation_tn.models.enums import UserRole


class User(BaseModel):
    """Compte utilisateur, sans donnée d'authentification.

    FR: Le mot de passe n'apparaît jamais dans ce modèle ; seul le
        vérificateur d'identifiants manipule les empreintes.
    EN: The password never appears here; only the credential verifier
        handles hashes.
    """

    id: str
    email: str
    nom: str = Field(..., description="Nom affiché / Display name")
    role: UserRole = UserRole.USER


class Session(BaseModel):
    """Session ouverte par une connexion réussie."""

    token: str
    user: User
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Indique si la session est expirée à l'instant donné."""
        return now >= self.expires_at
