"""
WSGI config for compliance_tracker.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "compliance_tracker.settings")

application = get_wsgi_application()
