from contextlib import contextmanager

from widgetpage.declarative import declarative
from widgetpage.sink import MarkupSink


@declarative
class Widget:
    """
    Base class for anything that renders markup and may need resources in
    the document head.

    Resources are declared on the class, not per instance, so a widget that
    shows up fifty times on a page still contributes its script once:

    .. code-block:: python

        class Greeting(Widget):
            look = external.css('greeting.css')

            def __init__(self, name):
                self.name = name

            def content(self):
                self.element('p', f'Hello {self.name}', attrs={'class': 'greeting'})

    Declaring in the class body is equivalent to calling
    :code:`Greeting.external('css', 'greeting.css')` after the class is
    defined. It's a good idea to declare a script in every widget that uses
    it, external resources are only emitted once anyway, and that way the
    script doesn't go missing when the one widget that happened to declare it
    is removed.
    """

    shares_resources = True

    sink: MarkupSink = None

    @classmethod
    def external(cls, kind, value):
        from widgetpage.registry import registry

        return registry.declare(cls, kind, value)

    def content(self):
        pass

    def render(self, sink=None):
        if sink is None:
            sink = MarkupSink()
        previous, self.sink = self.sink, sink
        try:
            self.content()
        finally:
            self.sink = previous
        return sink

    def widget(self, child, **kwargs):
        """
        Render a nested widget into the same output. `child` is either a
        widget instance or a widget class, which is then instantiated with
        `kwargs`.
        """
        if isinstance(child, type):
            child = child(**kwargs)
        else:
            assert not kwargs, 'Keyword arguments are only used when passing a widget class'
        child.render(self.sink)

    def element(self, tag, text=None, attrs=None):
        self.sink.element(tag, text, attrs)

    @contextmanager
    def tag(self, tag, attrs=None):
        self.sink.open_tag(tag, attrs)
        yield
        self.sink.close_tag(tag)

    def text(self, text):
        self.sink.text(text)

    def rawtext(self, text):
        self.sink.rawtext(text)

    def __html__(self):
        return self.render().__html__()

    def __str__(self):
        return self.__html__()
