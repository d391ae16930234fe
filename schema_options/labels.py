"""First-non-empty-wins label resolution.

Each provider is a zero-argument callable returning a candidate label or
``None``. Providers are evaluated lazily, left to right, so a later provider
never runs once an earlier one produced a label.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from .accessors import get_in
from .constants import TITLE_KEY
from .values import to_string_form

LabelProvider = Callable[[], Optional[str]]


def usable_label(candidate: Any) -> Optional[str]:
    if isinstance(candidate, str) and candidate:
        return candidate
    return None


def title_of(schema: Any) -> LabelProvider:
    return lambda: usable_label(get_in(schema, [TITLE_KEY]))


def fixed(candidate: Any) -> LabelProvider:
    return lambda: usable_label(candidate)


def value_label(value: Any) -> LabelProvider:
    return lambda: to_string_form(value)


def first_label(*providers: LabelProvider) -> str:
    for provider in providers:
        label = provider()
        if label:
            return label
    return ''
