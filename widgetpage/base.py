class DeclarationMisuse(ValueError):
    pass


class RenderStateError(Exception):
    pass


# Turns out len(x) is a good idea, and x.items() is a bad idea. Let's do it the way it should be done.
def items(container):
    return type(container).items(container)
