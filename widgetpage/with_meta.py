import functools


def with_meta(class_to_decorate=None, add_init_kwargs=True):
    """
    Class decorator to enable a class (and it's sub-classes) to have a 'Meta' class attribute.

    Members of the merged `Meta` are passed as keyword arguments to the
    constructor, so anything configured in `Meta` can also be overridden per
    instance:

    .. code-block:: python

        class PlainPage(Page):
            class Meta:
                basic_styles = False

        PlainPage()                   # basic_styles=False
        PlainPage(basic_styles=True)  # the explicit argument wins

    :type class_to_decorate: class
    :param bool add_init_kwargs: Pass Meta class members to constructor

    :rtype: class
    """

    if class_to_decorate is None:
        return functools.partial(with_meta, add_init_kwargs=add_init_kwargs)

    if add_init_kwargs:

        def get_extra_args_function(self):
            return {k: v for k, v in self.get_meta().items() if not k.startswith('_')}

        add_args_to_init_call(class_to_decorate, get_extra_args_function)

    setattr(class_to_decorate, 'get_meta', classmethod(get_meta))

    return class_to_decorate


def get_meta(cls):
    """
    Collect all members of any contained :code:`Meta` class declarations from the given class or any of its base classes.
    (Sub class values take precedence.)

    :type cls: class
    :rtype: dict
    """
    merged_attributes = {}
    for class_ in reversed(cls.mro()):
        if 'Meta' in class_.__dict__:
            for meta_class_ in reversed(class_.Meta.mro()):
                for key in meta_class_.__dict__:
                    if not key.startswith('__'):
                        merged_attributes[key] = getattr(class_.Meta, key)
    return merged_attributes


def add_args_to_init_call(cls, get_extra_args_function):
    __init__orig = getattr(cls, '__init__')

    @functools.wraps(__init__orig, assigned=['__doc__'])
    def argument_injector_wrapper(self, *args, **kwargs):
        __init__orig(self, *args, **{**get_extra_args_function(self), **kwargs})

    setattr(cls, '__init__', argument_injector_wrapper)
