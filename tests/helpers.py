"""Helpers for inspecting Dash component trees."""


def iter_components(node):
    """Walk a Dash component tree depth first."""
    if node is None or isinstance(node, (str, int, float)):
        return
    if isinstance(node, (list, tuple)):
        for child in node:
            yield from iter_components(child)
        return
    yield node
    yield from iter_components(getattr(node, "children", None))


def find_by_class(node, class_name):
    return [
        c
        for c in iter_components(node)
        if class_name in (getattr(c, "className", None) or "").split()
    ]


def find_by_type(node, type_name):
    return [c for c in iter_components(node) if type(c).__name__ == type_name]


def texts(node):
    """Every string child below node."""
    found = []

    def collect(n):
        if isinstance(n, str):
            found.append(n)
        elif isinstance(n, (list, tuple)):
            for child in n:
                collect(child)
        elif n is not None and not isinstance(n, (int, float)):
            collect(getattr(n, "children", None))

    collect(node)
    return found


