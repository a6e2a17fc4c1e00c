from django.urls import path, include

urlpatterns = [
    # Boutique, galerie, accueil
    path("", include("storefront.urls")),
    # Demande de devis
    path("devis/", include("quotes.urls")),
]
