import os
import sys
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(BASE_DIR))

# Priorité: DJANGO_ENV_FILE -> .env.production -> .env
for candidate in (os.environ.get("DJANGO_ENV_FILE"), BASE_DIR / ".env.production", BASE_DIR / ".env"):
    if candidate and Path(candidate).exists():
        load_dotenv(candidate)
        break

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "rhabilleurs.settings")

from django.core.wsgi import get_wsgi_application
application = get_wsgi_application()
