"""
ASGI config for memberhub project. The GraphQL view is async, so this is the
preferred entry point (e.g. `uvicorn memberhub.asgi:application`).
"""

import os

from django.core.asgi import get_asgi_application

from utils.config import get_settings_module

os.environ.setdefault("DJANGO_SETTINGS_MODULE", get_settings_module())

application = get_asgi_application()
