import os

import django
from django.conf import settings

if not settings.configured and not os.environ.get('DJANGO_SETTINGS_MODULE'):
    settings.configure(
        DEBUG=False,
        SECRET_KEY='pagelinks-tests',
        ALLOWED_HOSTS=['testserver'],
        ROOT_URLCONF='pagelinks.urls',
        INSTALLED_APPS=[
            'django.contrib.contenttypes',
            'django.contrib.auth',
        ],
        DATABASES={},
        USE_TZ=True,
    )
    django.setup()
