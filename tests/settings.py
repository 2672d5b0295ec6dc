SECRET_KEY = "foobar"

DATABASES = {}

USE_TZ = False

INSTALLED_APPS = [
    'widgetpage',
]

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'loggers': {
        'widgetpage': {
            'level': 'DEBUG',
        },
    },
}
