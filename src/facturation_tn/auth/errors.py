"""Hiérarchie d'exceptions pour l'authentification.

FR: Exceptions typées pour les identifiants refusés, les comptes déjà
    existants et les sessions inconnues ou expirées.
EN: Typed exceptions for refused credentials, existing accounts and unknown
    or expired sessions.
"""


class AuthError(Exception):
    """Erreur de base pour toutes les opérations d'authentification."""


class InvalidCredentialsError(AuthError):
    """Email ou mot de passe incorrect."""


class AccountExistsError(AuthError):
    """Un compte existe déjà pour cette adresse email."""


class SessionNotFoundError(AuthError):
    """Jeton de session inconnu, révoqué ou expiré.

    FR: L'utilisateur doit se reconnecter.
    EN: The user must sign in again.
    """
