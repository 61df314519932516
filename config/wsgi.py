"""WSGI entry point for the lucky draw site.

Environment comes from ``.env`` (loaded by ``config.settings``) or the
process environment of the application server.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
application = get_wsgi_application()
