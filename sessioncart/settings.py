import os

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-sessioncart-dev-key')

DEBUG = os.environ.get('DJANGO_DEBUG', '0') == '1'

ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')

INSTALLED_APPS = [
    'django.contrib.sessions',
    'cart',
]

MIDDLEWARE = [
    'django.middleware.common.CommonMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
]

ROOT_URLCONF = 'sessioncart.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'cart.context_processors.cart',
            ],
        },
    },
]

WSGI_APPLICATION = 'sessioncart.wsgi.application'

# Cookie sessions keep the cart; no database is configured
SESSION_ENGINE = 'django.contrib.sessions.backends.signed_cookies'

# Panier
CART_SESSION_KEY = 'cart'
CART_MAX_ITEMS = int(os.environ.get('CART_MAX_ITEMS', 10))
CART_INCREMENT_ON_DUPLICATE = True

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {'format': '{levelname} {name} {message}', 'style': '{'},
    },
    'handlers': {
        'console': {'class': 'logging.StreamHandler', 'formatter': 'simple'},
    },
    'loggers': {
        'cart': {
            'handlers': ['console'],
            'level': os.environ.get('CART_LOG_LEVEL', 'INFO'),
        },
    },
}

USE_TZ = True
