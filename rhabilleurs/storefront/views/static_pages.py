"""
Static Pages views - Fichiers de service.
"""

from django.http import HttpResponse


def robots_txt(request):
    """
    Génère robots.txt.

    Returns:
        HttpResponse: fichier texte robots.txt
    """
    lines = [
        "User-agent: *",
        "Allow: /",
        "",
        "# Étapes du formulaire de devis",
        "Disallow: /devis/envoye/",
        "Disallow: /boutique/filtre/",
    ]
    return HttpResponse("\n".join(lines), content_type="text/plain")
