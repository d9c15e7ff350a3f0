"""
ASGI config for the Task API project.

Exposes the ASGI callable as a module-level variable named ``application``
for servers such as Uvicorn or Daphne.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django at import time so the first request does not pay for it.
application = get_asgi_application()
