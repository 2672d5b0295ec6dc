import logging
import threading
from typing import (
    Dict,
    List,
    Tuple,
    Type,
)

from widgetpage.base import DeclarationMisuse
from widgetpage.resource import (
    Declaration,
    make_declaration,
    ResourceKind,
)

log = logging.getLogger(__name__)


class ResourceRegistry:
    """
    Process wide store of resource declarations, keyed by widget type.

    Every widget type owns the list of declarations it made itself. The
    *effective* declarations of a type are derived on demand: the own
    declarations of each registered ancestor, oldest ancestor first, then the
    type's own. A page additionally gets those of every shared (non page)
    widget type, in the order they were registered, see `page_resources`.

    The ancestor table is built when a type is registered, which happens when
    the class is defined. Nothing is snapshotted for rendering, so a
    declaration made after a page has been rendered shows up in the next
    render.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._own: Dict[type, List[Declaration]] = {}
        self._ancestors: Dict[type, Tuple[type, ...]] = {}
        self._shared: Dict[type, bool] = {}

    def register_type(self, cls: Type, *, shared=None) -> None:
        if not isinstance(cls, type):
            raise DeclarationMisuse(f'Resources are declared on widget types, not on {cls!r}')
        with self._lock:
            self._register_type(cls, shared=shared)

    def _register_type(self, cls, *, shared=None):
        if cls in self._ancestors:
            return
        if shared is None:
            shared = getattr(cls, 'shares_resources', True)
        self._shared[cls] = shared
        self._own[cls] = []
        self._ancestors[cls] = self._chain_of(cls)
        # A type registered after its subclasses (e.g. declared on again after a reset)
        for other in self._ancestors:
            if cls in other.__mro__[1:]:
                self._ancestors[other] = self._chain_of(other)

    def _chain_of(self, cls):
        return tuple(base for base in reversed(cls.__mro__[1:]) if base in self._ancestors)

    def is_registered(self, cls) -> bool:
        return cls in self._ancestors

    def ancestors(self, cls) -> Tuple[type, ...]:
        try:
            return self._ancestors[cls]
        except KeyError:
            return self._chain_of(cls)

    def declare(self, owner: Type, kind, value) -> Declaration:
        if not isinstance(owner, type):
            raise DeclarationMisuse(f'Resources are declared on widget types, not on {owner!r}')
        declaration = make_declaration(kind, value)
        with self._lock:
            self._register_type(owner)
            self._own[owner].append(declaration)
        log.debug('%s declared %s resource %r', owner.__qualname__, declaration.kind.value, declaration.value)
        return declaration

    def own(self, owner, kind=None) -> List[Declaration]:
        declarations = list(self._own.get(owner, ()))
        if kind is None:
            return declarations
        kind = _known_kind(kind)
        return [x for x in declarations if x.kind is kind]

    def registered_types(self) -> List[type]:
        return list(self._ancestors)

    def _values(self, types, kind):
        kind = _known_kind(kind)
        if kind is None:
            return []
        return [declaration.value for cls in types for declaration in self._own.get(cls, ()) if declaration.kind is kind]

    def effective(self, widget_type, kind) -> List[str]:
        """
        The declarations of `widget_type` and its registered ancestors, oldest
        ancestor first. A kind that was never declared, or that isn't a
        resource kind at all, gives an empty list.
        """
        return self._values([*self.ancestors(widget_type), widget_type], kind)

    def contributors(self, page_type) -> List[type]:
        chain = [*self.ancestors(page_type), page_type]
        in_chain = set(chain)
        # dict preserves registration order
        shared = [cls for cls, is_shared in self._shared.items() if is_shared and cls not in in_chain]
        return chain + shared

    def page_resources(self, page_type, kind) -> List[str]:
        """
        Everything that goes into the head of a `page_type` page: its
        effective declarations followed by those of every shared widget type.
        """
        return self._values(self.contributors(page_type), kind)

    def reset(self) -> None:
        with self._lock:
            self._own.clear()
            self._ancestors.clear()
            self._shared.clear()
        log.debug('Resource registry reset')


registry = ResourceRegistry()


def _known_kind(kind):
    if isinstance(kind, ResourceKind):
        return kind
    try:
        return ResourceKind(kind)
    except ValueError:
        return None
