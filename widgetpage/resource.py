from enum import Enum
from typing import NamedTuple

from widgetpage.base import DeclarationMisuse


class ResourceKind(Enum):
    """
    The category of a resource contribution. Each kind is its own namespace:
    a stylesheet URL declared as `css` never shows up among the `js` URLs.

    The short names are accepted everywhere a kind is expected, so
    `external('css', 'stuff.css')` and
    `external(ResourceKind.EXTERNAL_STYLE, 'stuff.css')` mean the same thing.
    """

    EXTERNAL_SCRIPT = 'js'
    INLINE_SCRIPT = 'script'
    EXTERNAL_STYLE = 'css'
    INLINE_STYLE = 'style'
    READY_SCRIPT = 'jquery'

    @classmethod
    def coerce(cls, kind):
        if isinstance(kind, cls):
            return kind
        try:
            return cls(kind)
        except ValueError:
            valid = ', '.join(repr(x.value) for x in cls)
            raise DeclarationMisuse(f'Unknown resource kind {kind!r}. Valid kinds are: {valid}') from None

    @property
    def is_external(self):
        return self in (ResourceKind.EXTERNAL_SCRIPT, ResourceKind.EXTERNAL_STYLE)


class Declaration(NamedTuple):
    kind: ResourceKind
    value: str


def make_declaration(kind, value) -> Declaration:
    kind = ResourceKind.coerce(kind)
    if not isinstance(value, str):
        raise DeclarationMisuse(f'A {kind.value} resource must be a string, you sent {value!r}')
    if not value.strip():
        raise DeclarationMisuse(f'A {kind.value} resource can not be empty')
    return Declaration(kind, value)


class External:
    """
    Builder for class level resource declarations:

    .. code-block:: python

        class Calendar(Widget):
            jquery = external.js('lib/jquery.js')
            look = external.css('calendar.css')
            setup = external.jquery('$(".calendar").calendar();')

    The attribute names are only there to make the class body legal Python,
    they carry no meaning. Declarations are recorded in the order they appear
    in the class body.

    Nothing is checked here. The declarations are validated one by one when
    the class is registered, so a malformed one (an empty url, say) is
    reported as a `DeclarationMisuse` from the class statement while the rest
    of the class' declarations are still recorded.
    """

    def __call__(self, kind, value):
        if not isinstance(kind, ResourceKind) and kind in [x.value for x in ResourceKind]:
            kind = ResourceKind(kind)
        return Declaration(kind, value)

    def js(self, url):
        return Declaration(ResourceKind.EXTERNAL_SCRIPT, url)

    def script(self, text):
        return Declaration(ResourceKind.INLINE_SCRIPT, text)

    def css(self, url):
        return Declaration(ResourceKind.EXTERNAL_STYLE, url)

    def style(self, text):
        return Declaration(ResourceKind.INLINE_STYLE, text)

    def jquery(self, text):
        return Declaration(ResourceKind.READY_SCRIPT, text)


external = External()
