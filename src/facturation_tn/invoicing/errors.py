"""Exceptions de la saisie des factures."""


class InvoiceValidationError(Exception):
    """Brouillon de facture refusé à l'enregistrement.

    FR: Le brouillon ne satisfait pas les contrôles de saisie (client
        manquant, ligne incomplète). ``errors`` détaille chaque problème.
    EN: The draft failed entry checks; ``errors`` lists each problem.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors: list[str] = errors or []
