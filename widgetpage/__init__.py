__version__ = '1.0.0'

from widgetpage.base import (
    DeclarationMisuse,
    RenderStateError,
)
from widgetpage.dedupe import dedupe
from widgetpage.page import Page
from widgetpage.registry import (
    registry,
    ResourceRegistry,
)
from widgetpage.resource import (
    Declaration,
    external,
    ResourceKind,
)
from widgetpage.widget import Widget

__all__ = [
    'Declaration',
    'DeclarationMisuse',
    'dedupe',
    'external',
    'Page',
    'registry',
    'RenderStateError',
    'ResourceKind',
    'ResourceRegistry',
    'Widget',
]
