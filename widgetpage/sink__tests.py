import pytest
from django.utils.safestring import mark_safe

from widgetpage.sink import MarkupSink


def test_element():
    sink = MarkupSink()
    sink.element('h1', 'Foo', attrs={'class': {'title': True}})
    assert sink.__html__() == '<h1 class="title">Foo</h1>'


def test_empty_element():
    sink = MarkupSink()
    sink.element('div')
    assert str(sink) == '<div></div>'


def test_void_element():
    sink = MarkupSink()
    sink.element('meta', attrs={'charset': 'utf-8'})
    sink.element('br')
    assert str(sink) == '<meta charset="utf-8"><br>'
    assert sink.open_tags == []


def test_void_element_with_content():
    with pytest.raises(AssertionError, match='br is a void element'):
        MarkupSink().element('br', 'foo')


def test_text_is_escaped():
    sink = MarkupSink()
    sink.text('<b>&</b>')
    sink.text(mark_safe('<i>safe</i>'))
    assert str(sink) == '&lt;b&gt;&amp;&lt;/b&gt;<i>safe</i>'


def test_rawtext():
    sink = MarkupSink()
    sink.rawtext('<!-- raw -->')
    assert str(sink) == '<!-- raw -->'


def test_open_and_close():
    sink = MarkupSink()
    sink.open_tag('ul')
    sink.open_tag('li', attrs={'id': 'first'})
    assert sink.open_tags == ['ul', 'li']
    sink.text('foo')
    sink.close_tag('li')
    sink.close_tag('ul')
    assert str(sink) == '<ul><li id="first">foo</li></ul>'


def test_close_wrong_tag():
    sink = MarkupSink()
    sink.open_tag('ul')
    with pytest.raises(AssertionError):
        sink.close_tag('ol')
