"""Modèles de données Pydantic pour la facturation."""

from facturation_tn.computation.totals import InvoiceTotals
from facturation_tn.models.catalog import Category, Client, CompanyInfo, Product
from facturation_tn.models.enums import Currency, UserRole
from facturation_tn.models.invoice import Invoice, InvoiceLine, InvoiceRecord

__all__ = [
    "Category",
    "Client",
    "CompanyInfo",
    "Currency",
    "Invoice",
    "InvoiceLine",
    "InvoiceRecord",
    "InvoiceTotals",
    "Product",
    "UserRole",
]
