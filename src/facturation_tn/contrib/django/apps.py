"""Configuration de l'application Django pour la facturation."""

from django.apps import AppConfig


class FacturationTnConfig(AppConfig):
    """Configuration de l'app Django facturation-tn."""

    name = "facturation_tn.contrib.django"
    label = "facturation_tn"
    verbose_name = "Facturation (Tunisie)"
