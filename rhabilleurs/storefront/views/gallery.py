"""
Gallery views - Réalisations avant/après.
"""

from django.shortcuts import render
from django.views.decorators.http import require_GET

from ..services.catalog import RepairType, get_catalog


@require_GET
def gallery(request):
    """
    Galerie des restaurations.

    Query params:
        type (str, optional): Catégorie de réparation (revision_complete, polissage, ...)
    """
    catalog = get_catalog()
    selected_type = (request.GET.get('type') or '').strip()
    if selected_type not in RepairType.values:
        selected_type = ''

    cases = catalog.gallery_by_type(selected_type or None)
    counts = catalog.repair_type_counts()
    repair_types = [
        {'value': value, 'label': label, 'count': counts.get(value, 0)}
        for value, label in RepairType.choices
    ]

    return render(
        request,
        'pages/gallery.html',
        {
            'cases': cases,
            'results_count': len(cases),
            'repair_types': repair_types,
            'selected_type': selected_type,
        }
    )
