"""Vues Django pour la facturation.

FR: Vues CBV asynchrones renvoyant du JSON : calcul des totaux d'un
    brouillon, prochain numéro, enregistrement, aperçu imprimable et
    tableau de bord. Pas de dépendance à Django REST Framework.
EN: Async CBV views returning JSON: draft totals, next number, saving,
    printable preview and dashboard. No DRF dependency.
"""

import json
import logging

from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from pydantic import ValidationError

from facturation_tn.computation.formatting import format_amount
from facturation_tn.computation.numbering import next_invoice_number
from facturation_tn.computation.words import amount_to_words
from facturation_tn.contrib.django.conf import (
    get_company,
    get_default_currency,
    get_store_instance,
)
from facturation_tn.invoicing.editor import InvoiceEditor
from facturation_tn.invoicing.errors import InvoiceValidationError
from facturation_tn.invoicing.preview import build_preview
from facturation_tn.models.invoice import Invoice
from facturation_tn.storage.base import BaseStore
from facturation_tn.storage.errors import StoreConflictError, StoreError, StoreNotFoundError

logger = logging.getLogger(__name__)


class StoreMixin:
    """Mixin fournissant l'accès au store et la traduction des erreurs."""

    def get_store(self) -> BaseStore:
        """Retourne le store configuré."""
        return get_store_instance()

    def error_response(self, exc: Exception) -> JsonResponse:
        """Traduit une exception du domaine en réponse JSON."""
        if isinstance(exc, StoreNotFoundError):
            return JsonResponse({"error": str(exc)}, status=404)
        if isinstance(exc, StoreConflictError):
            return JsonResponse({"error": str(exc)}, status=409)
        if isinstance(exc, InvoiceValidationError):
            return JsonResponse({"error": str(exc), "details": exc.errors}, status=400)
        logger.exception("Erreur inattendue du store de facturation")
        return JsonResponse({"error": "Erreur interne du store."}, status=500)


def _parse_draft(request: HttpRequest) -> Invoice:
    """Lit un brouillon de facture JSON dans le corps de la requête.

    Raises:
        InvoiceValidationError: Si le corps n'est pas un brouillon valide.
    """
    try:
        data = json.loads(request.body or b"{}")
    except json.JSONDecodeError as exc:
        msg = "Corps JSON invalide."
        raise InvoiceValidationError(msg, [str(exc)]) from exc
    if not isinstance(data, dict):
        msg = "Le brouillon doit être un objet JSON."
        raise InvoiceValidationError(msg)
    data.setdefault("devise", get_default_currency())
    try:
        return Invoice.model_validate(data)
    except ValidationError as exc:
        msg = "Brouillon de facture invalide."
        errors = [f"{'.'.join(map(str, err['loc']))} : {err['msg']}" for err in exc.errors()]
        raise InvoiceValidationError(msg, errors) from exc


@method_decorator(csrf_exempt, name="dispatch")
class TotalsView(StoreMixin, View):
    """Calcule les totaux d'un brouillon (POST)."""

    async def post(self, request) -> JsonResponse:
        """Renvoie les totaux bruts, formatés et le TTC en lettres."""
        try:
            draft = _parse_draft(request)
        except InvoiceValidationError as exc:
            return self.error_response(exc)

        totals = draft.totals()
        formatted = {
            name: format_amount(value, draft.devise)
            for name, value in totals.model_dump().items()
        }
        return JsonResponse(
            {
                "totals": totals.model_dump(mode="json"),
                "formatted": formatted,
                "amount_in_words": amount_to_words(totals.total_ttc, draft.devise),
            }
        )


class NextNumberView(StoreMixin, View):
    """Prochain numéro de facture disponible (GET)."""

    async def get(self, request) -> JsonResponse:
        """Calcule le numéro à partir des factures du store."""
        try:
            invoices = await self.get_store().list_invoices()
        except StoreError as exc:
            return self.error_response(exc)
        return JsonResponse({"numero": next_invoice_number(invoices)})


@method_decorator(csrf_exempt, name="dispatch")
class InvoiceCreateView(StoreMixin, View):
    """Enregistre un brouillon de facture (POST)."""

    async def post(self, request) -> JsonResponse:
        """Valide le brouillon, vérifie le client puis l'enregistre."""
        store = self.get_store()
        try:
            draft = _parse_draft(request)
            if draft.client_id and await store.get_client(draft.client_id) is None:
                msg = f"Client non trouvé : {draft.client_id}"
                raise StoreNotFoundError(msg)
            editor = InvoiceEditor()
            editor.draft = draft
            saved = await editor.save(store)
        except (InvoiceValidationError, StoreError) as exc:
            return self.error_response(exc)
        return JsonResponse(saved.model_dump(mode="json"), status=201)


class InvoicePreviewView(StoreMixin, View):
    """Aperçu imprimable d'une facture enregistrée (GET)."""

    async def get(self, request, invoice_id: str) -> JsonResponse:
        """Construit l'aperçu avec l'émetteur configuré."""
        try:
            invoice = await self.get_store().get_invoice(invoice_id)
        except StoreError as exc:
            return self.error_response(exc)
        if invoice is None:
            return JsonResponse({"error": "Facture non trouvée."}, status=404)
        preview = build_preview(invoice, company=get_company())
        return JsonResponse(preview.model_dump(mode="json"))


class DashboardView(StoreMixin, View):
    """Statistiques du tableau de bord (GET)."""

    async def get(self, request) -> JsonResponse:
        """Compteurs, chiffre d'affaires formaté et factures récentes."""
        try:
            stats = await self.get_store().get_dashboard_stats()
        except StoreError as exc:
            return self.error_response(exc)
        data = stats.model_dump(mode="json")
        data["invoice_total_formatted"] = format_amount(
            stats.invoice_total, get_default_currency()
        )
        return JsonResponse(data)
