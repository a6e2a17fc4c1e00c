"""
Storefront views package.

Structure:
- utils.py - Utilitaires (mailto, limites de l'accueil)
- catalog.py - Accueil et boutique
- product.py - Fiche montre
- gallery.py - Galerie avant/après
- static_pages.py - robots.txt
"""

from .catalog import (
    boutique,
    boutique_filter,
    home,
)
from .gallery import gallery
from .product import watch_detail
from .static_pages import robots_txt
from .utils import (
    HOME_FEATURED_GALLERY,
    HOME_FEATURED_WATCHES,
    build_inquiry_mailto,
)

__all__ = [
    'boutique',
    'boutique_filter',
    'home',
    'gallery',
    'watch_detail',
    'robots_txt',
    'build_inquiry_mailto',
    'HOME_FEATURED_GALLERY',
    'HOME_FEATURED_WATCHES',
]
