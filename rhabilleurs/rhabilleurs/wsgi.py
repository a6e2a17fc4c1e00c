"""
WSGI config for the Les Rhabilleurs website.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "rhabilleurs.settings")

application = get_wsgi_application()
