"""
Catalog views - Accueil et boutique.

Contient les vues pour:
- La page d'accueil (home)
- La boutique avec recherche, filtres et tri (boutique)
- Le rafraîchissement AJAX des résultats (boutique_filter)
"""

import logging

from django.http import JsonResponse
from django.shortcuts import render
from django.template.loader import render_to_string
from django.views.decorators.http import require_GET

from ..forms import criteria_from_query
from ..services.catalog import apply_filters, get_catalog
from .utils import get_home_limits

logger = logging.getLogger(__name__)

IGNORED_BOUND_LABELS = {
    'min_price': 'prix minimum',
    'max_price': 'prix maximum',
}


def _filter_context(request):
    """
    Parse les critères de la query string et applique le filtre.

    Returns:
        dict: Contexte commun à la page boutique et à l'endpoint AJAX
    """
    catalog = get_catalog()
    criteria, form = criteria_from_query(request.GET, catalog=catalog)
    watches = apply_filters(catalog.watches, criteria)

    ignored = [IGNORED_BOUND_LABELS[name] for name in form.ignored_bounds]
    if ignored:
        logger.debug("Ignoring unparsable price bound(s) %s in %s", form.ignored_bounds, request.GET.urlencode())

    return {
        'form': form,
        'criteria': criteria,
        'watches': watches,
        'results_count': len(watches),
        'total_count': len(catalog.watches),
        'has_active_filters': criteria.has_active_filters or bool(ignored),
        'ignored_bounds': ignored,
        'brands': catalog.get_brands(),
    }


@require_GET
def home(request):
    """
    Page d'accueil.

    Features:
    - Montres mises en avant (les premières de l'inventaire)
    - Dernières réalisations avant/après
    """
    catalog = get_catalog()
    watches_limit, gallery_limit = get_home_limits()
    return render(
        request,
        'pages/index.html',
        {
            'featured_watches': catalog.featured_watches(watches_limit),
            'featured_gallery': catalog.featured_gallery(gallery_limit),
        }
    )


@require_GET
def boutique(request):
    """
    Page boutique.

    Query params:
        q (str): Recherche sur la marque ou le modèle
        brand (list): Marques retenues
        movement (list): Types de mouvement
        condition (list): États
        min_price / max_price (str): Bornes de prix en CHF
        sort (str): newest | price_asc | price_desc
    """
    return render(request, 'pages/catalog.html', _filter_context(request))


@require_GET
def boutique_filter(request):
    """
    Endpoint AJAX: recalcule la liste à chaque changement de critère.

    Returns:
        JsonResponse: fragment HTML des cartes + métadonnées
    """
    context = _filter_context(request)
    html = render_to_string('partials/watches_list.html', context, request=request)
    return JsonResponse({
        'html': html,
        'results_count': context['results_count'],
        'has_active_filters': context['has_active_filters'],
        'ignored_bounds': context['ignored_bounds'],
        'query': context['criteria'].to_query(),
    })
