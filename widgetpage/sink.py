from widgetpage._web_compat import (
    conditional_escape,
    format_html,
    mark_safe,
)
from widgetpage.attrs import render_attrs

# https://html.spec.whatwg.org/multipage/syntax.html#void-elements
_void_elements = [
    'area',
    'base',
    'br',
    'col',
    'embed',
    'hr',
    'img',
    'input',
    'link',
    'meta',
    'param',
    'source',
    'track',
    'wbr',
]


class MarkupSink:
    """
    Accumulates markup for one render. Tags are opened and closed explicitly,
    text is escaped unless it goes through `rawtext`.
    """

    def __init__(self):
        self._parts = []
        self._open = []

    def open_tag(self, tag, attrs=None):
        self._parts.append(format_html('<{}{}>', tag, render_attrs(attrs)))
        if tag not in _void_elements:
            self._open.append(tag)

    def close_tag(self, tag):
        assert self._open and self._open[-1] == tag, f'Closing {tag} but the innermost open tag is {self._open[-1:]}'
        self._open.pop()
        self._parts.append(format_html('</{}>', tag))

    def element(self, tag, text=None, attrs=None):
        if tag in _void_elements:
            assert text is None, f'{tag} is a void element, but it has content: {text}'
            self.open_tag(tag, attrs)
            return
        self.open_tag(tag, attrs)
        if text is not None:
            self.text(text)
        self.close_tag(tag)

    def text(self, text):
        self._parts.append(conditional_escape(text))

    def rawtext(self, text):
        self._parts.append(mark_safe(text))

    @property
    def open_tags(self):
        return list(self._open)

    def __html__(self):
        return mark_safe(''.join(self._parts))

    def __str__(self):
        return self.__html__()
