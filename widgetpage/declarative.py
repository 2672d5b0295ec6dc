from typing import (
    Type,
    TypeVar,
)

from widgetpage.base import DeclarationMisuse
from widgetpage.resource import Declaration

T = TypeVar("T")


def declarative(class_to_decorate: Type[T]) -> Type[T]:
    """
    Class decorator that registers the decorated class, and every class that
    inherits from it, with the resource registry at class definition time.

    Class level attributes that are resource declarations (as created by
    :code:`external`) are recorded as the class' own declarations, in the
    order they appear in the class body.
    """

    class DeclarativeMeta(class_to_decorate.__class__):  # type:ignore
        # noinspection PyMethodParameters
        def __init__(cls, name, bases, dict_):  # noqa: N805
            super(DeclarativeMeta, cls).__init__(name, bases, dict_)
            register_declarations(cls)

    new_class = DeclarativeMeta(
        class_to_decorate.__name__,
        class_to_decorate.__bases__,
        {k: v for k, v in class_to_decorate.__dict__.items() if k not in ['__dict__', '__weakref__']},
    )

    return new_class


def register_declarations(cls):
    from widgetpage.registry import registry

    registry.register_type(cls)
    errors = []
    for declaration in get_members(cls):
        try:
            registry.declare(cls, declaration.kind, declaration.value)
        except DeclarationMisuse as e:
            errors.append(str(e))
    if errors:
        raise DeclarationMisuse(f'{cls.__name__}: ' + '; '.join(errors))


def get_members(cls):
    """
    Collect the resource declarations made in the body of `cls` itself. Base
    classes are not traversed, the registry takes care of inheritance.
    """

    def is_a_member(maybe_member):
        return isinstance(maybe_member, Declaration)

    for name, obj in cls.__dict__.items():
        if name.startswith('__'):
            continue
        if is_a_member(obj):
            yield obj
        elif isinstance(obj, list) and obj and all(is_a_member(x) for x in obj):
            yield from obj
        elif type(obj) is tuple and len(obj) == 1 and is_a_member(obj[0]):
            raise TypeError(
                f"'{name}' is a one-tuple containing what we are looking for.  Trailing comma much?  Don't... just don't."
            )  # pragma: no mutate
