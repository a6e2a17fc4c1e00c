"""
Product views - Fiche détaillée d'une montre.
"""

import logging

from django.shortcuts import render
from django.views.decorators.http import require_GET

from ..services.catalog import get_catalog
from .utils import build_inquiry_mailto

logger = logging.getLogger(__name__)


@require_GET
def watch_detail(request, watch_id):
    """
    Fiche d'une montre de la boutique.

    Args:
        watch_id (str): Identifiant de la montre

    Un identifiant inconnu n'est pas une erreur: on rend la page
    "Montre non trouvée" (statut 404) avec un lien de retour vers la boutique.
    """
    watch = get_catalog().get_watch(watch_id)
    if watch is None:
        logger.info("Watch not found: %s", watch_id)
        return render(
            request,
            'pages/product_not_found.html',
            {'watch_id': watch_id},
            status=404,
        )

    mailto_link = build_inquiry_mailto(watch, request.build_absolute_uri())
    return render(
        request,
        'pages/product_detail.html',
        {
            'watch': watch,
            'photos': watch.photos,
            'mailto_link': mailto_link,
        }
    )
