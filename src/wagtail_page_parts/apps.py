"""Django app configuration for wagtail-page-parts."""

from django.apps import AppConfig


class WagtailPagePartsConfig(AppConfig):
    name = "wagtail_page_parts"
    verbose_name = "Wagtail Page Parts"
