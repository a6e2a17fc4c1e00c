"""
Utilitaires partagés par les vues de la boutique.
"""
from urllib.parse import quote

from django.conf import settings

from ..templatetags.price_filters import chf


def get_home_limits():
    """
    Nombre de montres et de réalisations mises en avant sur l'accueil.

    Returns:
        tuple: (watches, gallery_cases)
    """
    return (
        int(getattr(settings, 'HOME_FEATURED_WATCHES', HOME_FEATURED_WATCHES)),
        int(getattr(settings, 'HOME_FEATURED_GALLERY', HOME_FEATURED_GALLERY)),
    )


def build_inquiry_mailto(watch, page_url, email=None):
    """
    Lien ``mailto:`` pré-rempli pour demander des informations sur une montre.

    Args:
        watch: WatchListing concernée
        page_url (str): URL absolue de la fiche produit
        email (str, optional): Adresse de l'atelier (WORKSHOP_EMAIL par défaut)

    Returns:
        str: Lien mailto avec sujet et corps encodés
    """
    email = email or getattr(settings, 'WORKSHOP_EMAIL', 'contact@lesrhabilleurs.ch')
    subject = f"Demande d’information – {watch.brand} {watch.model}"
    body = (
        "Bonjour,\n\n"
        "Je souhaiterais obtenir plus d’informations concernant la montre suivante :\n\n"
        f"Marque : {watch.brand}\n"
        f"Modèle : {watch.model}\n"
        f"Année : {watch.year}\n"
        f"Mouvement : {watch.movement_label}\n"
        f"Prix : {chf(watch.price)}\n\n"
        "Lien de la montre :\n"
        f"{page_url}\n\n"
        "Merci d’avance.\n\n"
        "Cordialement,\n"
    )
    return f"mailto:{email}?subject={quote(subject)}&body={quote(body)}"


# Constantes
HOME_FEATURED_WATCHES = 4
HOME_FEATURED_GALLERY = 3
