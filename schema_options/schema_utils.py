from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Tuple

from .accessors import get_mapping, get_sequence
from .constants import ANY_OF_KEY, ENUM_KEY, ITEMS_KEY, ONE_OF_KEY, PROPERTIES_KEY, ROOT_PATH
from .paths import join_path


def has_options(schema: Any) -> bool:
    """True when ``schema`` has an ``enum``, ``anyOf`` or ``oneOf`` list."""
    return any(get_sequence(schema, key) is not None for key in (ENUM_KEY, ANY_OF_KEY, ONE_OF_KEY))


def find_option_paths(schema: Any) -> List[str]:
    """List the dot paths of every sub-schema that resolves to options.

    Walks ``properties`` and single-schema ``items``; ``anyOf``/``oneOf``
    branches are options themselves and are not descended into. ``$ref`` is
    left alone. The top-level schema is reported as ``'(root)'``.
    """
    found: List[str] = []
    stack: List[Tuple[Any, Tuple[str, ...]]] = [(schema, ())]
    seen = set()

    while stack:
        node, segments = stack.pop()
        if not isinstance(node, Mapping) or id(node) in seen:
            continue
        seen.add(id(node))

        if has_options(node):
            found.append(join_path(segments))
            continue

        props = get_mapping(node, PROPERTIES_KEY)
        if props is not None:
            for name, sub in props.items():
                stack.append((sub, segments + (str(name),)))
        items = node.get(ITEMS_KEY)
        if isinstance(items, Mapping):
            stack.append((items, segments + (ITEMS_KEY,)))

    # '(root)' first, then alphabetical like the rest of the path pickers.
    return sorted(found, key=lambda p: (p != ROOT_PATH, p))
