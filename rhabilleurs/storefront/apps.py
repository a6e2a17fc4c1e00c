from django.apps import AppConfig
class StorefrontConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'storefront'
    verbose_name = 'Boutique'

    def ready(self):
        # Construit l'inventaire au démarrage: une donnée invalide doit empêcher le boot
        from .services.catalog import get_catalog

        get_catalog()
