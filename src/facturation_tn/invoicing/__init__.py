"""Saisie des factures et aperçu imprimable."""

from facturation_tn.invoicing.editor import InvoiceEditor, search_clients, search_products
from facturation_tn.invoicing.errors import InvoiceValidationError
from facturation_tn.invoicing.preview import (
    DEFAULT_COMPANY,
    InvoicePreview,
    PreviewRow,
    TotalRow,
    build_preview,
)

__all__ = [
    "DEFAULT_COMPANY",
    "InvoiceEditor",
    "InvoicePreview",
    "InvoiceValidationError",
    "PreviewRow",
    "TotalRow",
    "build_preview",
    "search_clients",
    "search_products",
]
