from django.conf import settings
from django.urls import reverse


NAVIGATION = (
    ('Accueil', 'home'),
    ('Boutique', 'boutique'),
    ('Galerie', 'gallery'),
    ('Demande de devis', 'quotes:request'),
)

OPENING_HOURS = (
    ('Lundi - Vendredi', '9h00 - 18h00'),
    ('Samedi', '9h00 - 12h00'),
    ('Dimanche', 'Fermé'),
)


def navigation(request):
    """
    Processeur de contexte: liens du menu avec l'entrée active.
    """
    current = request.path
    items = []
    for label, url_name in NAVIGATION:
        url = reverse(url_name)
        if url == '/':
            active = current == '/'
        else:
            active = current.startswith(url)
        items.append({'label': label, 'url': url, 'active': active})
    return {'nav_items': items}


def workshop(request):
    """
    Processeur de contexte: coordonnées et horaires de l'atelier (pied de page).
    """
    return {
        'WORKSHOP_NAME': getattr(settings, 'WORKSHOP_NAME', 'Les Rhabilleurs'),
        'WORKSHOP_EMAIL': getattr(settings, 'WORKSHOP_EMAIL', ''),
        'WORKSHOP_PHONE': getattr(settings, 'WORKSHOP_PHONE', ''),
        'OPENING_HOURS': OPENING_HOURS,
    }
