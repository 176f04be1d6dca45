"""Configuration des URLs Django pour la facturation."""

from django.urls import path

from facturation_tn.contrib.django.views import (
    DashboardView,
    InvoiceCreateView,
    InvoicePreviewView,
    NextNumberView,
    TotalsView,
)

app_name = "facturation_tn"

urlpatterns = [
    path("totals/", TotalsView.as_view(), name="totals"),
    path("next-number/", NextNumberView.as_view(), name="next-number"),
    path("invoices/", InvoiceCreateView.as_view(), name="invoice-create"),
    path(
        "invoices/<str:invoice_id>/preview/",
        InvoicePreviewView.as_view(),
        name="invoice-preview",
    ),
    path("dashboard/", DashboardView.as_view(), name="dashboard"),
]
