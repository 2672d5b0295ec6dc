from django.test import override_settings

from widgetpage._web_compat import (
    format_html,
    get_setting,
)


def test_format_html():
    assert format_html('<{}>', '&') == '<&amp;>'
    assert format_html('<br>') == '<br>'
    assert format_html('<br>').__html__() == '<br>'


def test_get_setting_default():
    assert get_setting('WIDGETPAGE_DOES_NOT_EXIST', 'default') == 'default'


@override_settings(WIDGETPAGE_BASIC_STYLES=False)
def test_get_setting():
    assert get_setting('WIDGETPAGE_BASIC_STYLES', True) is False
