from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.http import HttpResponse  # noqa: F401
from django.utils.html import (
    conditional_escape,  # noqa: F401
    format_html as django_format_html,
)
from django.utils.safestring import mark_safe


def format_html(s, *args, **kwargs):
    if not args and not kwargs:
        return mark_safe(s)
    return django_format_html(s, *args, **kwargs)


def get_setting(name, default=None):
    try:
        return getattr(settings, name, default)
    except ImproperlyConfigured:
        return default
