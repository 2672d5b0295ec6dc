from widgetpage.dedupe import for_emission
from widgetpage.resource import ResourceKind

# Defined above any other styles in the head, so anything can redefine them.
# "right" floats right, "left" floats left, "clear" clears floats on both
# sides while being as small as possible. And images have no border.
BASIC_STYLES = '''
img {border: none}
.right {float: right;}
.left {float: left;}
.clear {background: none;border: 0;clear: both;display: block;float: none;font-size: 0;margin: 0;padding: 0;position: static;overflow: hidden;visibility: hidden;width: 0;height: 0;}
'''

READY_ENVELOPE = 'jQuery(document).ready(function($){\n%s\n});'


def resources(page, kind):
    from widgetpage.registry import registry

    return for_emission(kind, registry.page_resources(page.context.page_type, kind))


def meta(page):
    page.element('meta', attrs={'http-equiv': 'content-type', 'content': 'text/html;charset=UTF-8'})


def title(page):
    page.element('title', page.page_title())


def basic_styles(page):
    with page.tag('style', attrs={'type': 'text/css'}):
        page.rawtext(BASIC_STYLES)


def included_stylesheets(page):
    for href in resources(page, ResourceKind.EXTERNAL_STYLE):
        page.element('link', attrs={'rel': 'stylesheet', 'href': href, 'type': 'text/css', 'media': 'all'})


def inline_styles(page):
    with page.tag('style', attrs={'type': 'text/css', 'xml:space': 'preserve'}):
        page.rawtext('\n')
        for text in resources(page, ResourceKind.INLINE_STYLE):
            page.rawtext('\n')
            page.rawtext(text)


def included_scripts(page):
    for src in resources(page, ResourceKind.EXTERNAL_SCRIPT):
        with page.tag('script', attrs={'type': 'text/javascript', 'src': src}):
            pass


def inline_scripts(page):
    with page.tag('script', attrs={'type': 'text/javascript'}):
        for text in resources(page, ResourceKind.INLINE_SCRIPT):
            page.rawtext('\n')
            page.rawtext(text)
        for text in resources(page, ResourceKind.READY_SCRIPT):
            page.rawtext('\n')
            page.rawtext(READY_ENVELOPE % text)


def assemble_head(page):
    """
    Emit the contents of the head element. The order matters, since later
    style sheets and scripts override earlier ones:

    1. content type meta
    2. title
    3. the basic styles, unless turned off with `basic_styles=False`
    4. external style sheets
    5. inline styles
    6. external scripts
    7. inline scripts, then the document ready scripts
    """
    meta(page)
    title(page)
    if page.context.basic_styles:
        basic_styles(page)
    included_stylesheets(page)
    inline_styles(page)
    included_scripts(page)
    inline_scripts(page)
