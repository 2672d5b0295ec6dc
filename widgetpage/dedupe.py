from widgetpage.resource import ResourceKind


def dedupe(values):
    """
    Drop exact duplicates, keeping the first occurrence of each value in place.
    """
    seen = set()
    result = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def for_emission(kind, values):
    # Only URLs are uniqued. Inline snippets are emitted once per declaration,
    # since a widget may rely on running the same snippet more than once.
    if ResourceKind.coerce(kind).is_external:
        return dedupe(values)
    return list(values)
