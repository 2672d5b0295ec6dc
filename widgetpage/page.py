import logging
from enum import Enum
from typing import (
    Callable,
    NamedTuple,
    Optional,
)

from widgetpage._web_compat import (
    get_setting,
    HttpResponse,
)
from widgetpage.base import RenderStateError
from widgetpage.head import assemble_head
from widgetpage.sink import MarkupSink
from widgetpage.widget import Widget
from widgetpage.with_meta import with_meta

log = logging.getLogger(__name__)

XHTML_TRANSITIONAL = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN"\n'
    '   "http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">'
)


class RenderState(Enum):
    CREATED = 'created'
    HEAD_EMITTED = 'head emitted'
    BODY_EMITTED = 'body emitted'
    COMPLETE = 'complete'


class BodySource(Enum):
    OVERRIDE = 'override'
    BLOCK = 'block'
    NONE = 'none'


class Body(NamedTuple):
    source: BodySource
    function: Optional[Callable] = None


class RenderContext:
    def __init__(self, *, page_type, body: Body, basic_styles: bool):
        self.page_type = page_type
        self.body = body
        self.basic_styles = basic_styles
        self.state = RenderState.CREATED

    def advance(self, from_state, to_state):
        if self.state is not from_state:
            raise RenderStateError(f'Can not go from {from_state.value} to {to_state.value}, the page is {self.state.value}')
        self.state = to_state


@with_meta
class Page(Widget):
    """
    A complete html document. Subclass it and override `body_content`:

    .. code-block:: python

        class MyPage(Page):
            jquery = external.js('lib/jquery.js')
            ready = external.jquery('$(".foo").hide();')
            look = external.css('stuff.css')

            def page_title(self):
                return 'my app'

            def body_content(self):
                self.element('h1', 'My App')
                self.widget(Greeting, name='you')

    For a quick page without a subclass, pass a function that gets the page:
    `Page(lambda page: page.element('p', 'hello'))`.

    Every page renders the resources declared by its own class and its base
    classes, plus those declared by any (non page) widget class. If you want
    something in the head for just one page, override `head_content`, call
    super, and then emit it yourself.
    """

    shares_resources = False

    class Meta:
        basic_styles = None
        lang = 'en'

    def __init__(self, body_content_block=None, *, basic_styles=None, lang='en'):
        if basic_styles is None:
            basic_styles = get_setting('WIDGETPAGE_BASIC_STYLES', True)
        self.body_content_block = body_content_block
        self.basic_styles = basic_styles
        self.lang = lang
        self.context: Optional[RenderContext] = None
        self.request = None
        self.url_params = {}

    def doctype(self):
        return XHTML_TRANSITIONAL

    def page_title(self):
        return type(self).__name__

    def body_class(self):
        return None

    def body_content(self):
        pass

    def head_content(self):
        assemble_head(self)

    def resolve_body(self) -> Body:
        if type(self).body_content is not Page.body_content:
            return Body(BodySource.OVERRIDE, self.body_content)
        if self.body_content_block is not None:
            return Body(BodySource.BLOCK, lambda: self.body_content_block(self))
        return Body(BodySource.NONE)

    def content(self):
        if self.context is not None:
            raise RenderStateError(f'{type(self).__name__} is already being rendered')
        self.context = context = RenderContext(
            page_type=type(self),
            body=self.resolve_body(),
            basic_styles=self.basic_styles,
        )
        try:
            self.rawtext(self.doctype())
            with self.tag('html', attrs={'xmlns': 'http://www.w3.org/1999/xhtml', 'xml:lang': self.lang, 'lang': self.lang}):
                with self.tag('head'):
                    self.head_content()
                context.advance(RenderState.CREATED, RenderState.HEAD_EMITTED)

                with self.tag('body', attrs={'class': self.body_class()}):
                    if context.body.function is not None:
                        context.body.function()
                context.advance(RenderState.HEAD_EMITTED, RenderState.BODY_EMITTED)

            context.advance(RenderState.BODY_EMITTED, RenderState.COMPLETE)
            log.debug('Rendered %s (body: %s)', context.page_type.__qualname__, context.body.source.value)
        finally:
            self.context = None

    def render(self, sink=None):
        if sink is None:
            sink = MarkupSink()
        return super().render(sink).__html__()

    def render_to_response(self):
        return HttpResponse(self.render())

    @classmethod
    def as_view(cls, **kwargs):
        def view_wrapper(request, **url_params):
            page = cls(**kwargs)
            page.request = request
            page.url_params = url_params
            return page.render_to_response()

        view_wrapper.__name__ = f'{cls.__name__}.as_view'
        view_wrapper.__doc__ = cls.__doc__

        return view_wrapper
