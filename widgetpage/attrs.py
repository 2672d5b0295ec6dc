from widgetpage._web_compat import mark_safe
from widgetpage.base import items


def render_attrs(attrs):
    """
    Render HTML attributes, or return '' if no attributes needs to be rendered.

    `None` values are skipped and `True` renders a bare attribute. The `class`
    attribute may also be given as a dict of class name to flag.
    """
    if not attrs:
        return ''

    def parts():
        for key, value in sorted(attrs.items()):
            if value is None or value is False:
                continue
            if value is True:
                yield f'{key}'
                continue
            if isinstance(value, dict):
                if key != 'class':
                    raise TypeError(f'Only the class attribute can be a dict, you sent {value} for key {key}')
                value = render_class(value)
                if not value:
                    continue
            elif isinstance(value, (list, tuple)):
                raise TypeError(f"Attributes can't be of type {type(value).__name__}, you sent {value} for key {key}")
            elif callable(value):
                raise TypeError(f"Attributes can't be callable, you sent {value!r} for key {key}")
            v = f'{value}'.replace('&', '&amp;').replace('"', '&quot;')
            yield f'{key}="{v}"'

    r = mark_safe(' %s' % ' '.join(parts()))
    return '' if r == ' ' else r


def render_class(class_dict):
    return ' '.join(sorted(name for name, flag in items(class_dict) if flag))
