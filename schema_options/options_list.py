"""Turn an option-bearing schema into the list a selection control displays.

``resolve_options`` looks at the shape of the schema and hands it to one of two
builders:

- ``enum`` values become one option each, labelled from the overlay's
  ``enumNames`` table and reordered by ``enumOrder``;
- ``anyOf`` / ``oneOf`` branches become one option each, carrying the branch
  schema, with value and label taken from the selector field when one is
  active and from the branch itself otherwise.

Inputs are read, never modified, and nothing is cached between calls.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .accessors import get_in, get_sequence, get_sub_overlay, get_subschema, is_sequence
from .constants import ANY_OF_KEY, CONST_KEY, DEFAULT_KEY, ENUM_KEY, ONE_OF_KEY, PROPERTIES_KEY
from .discriminator import get_discriminator_field
from .enum_order import apply_enum_order
from .labels import first_label, fixed, title_of, value_label
from .types import Schema, UiOverlay
from .ui_options import UiOptions, get_ui_options
from .values import to_constant, to_string_form

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnumOption:
    label: str
    # Values and branch schemas may be dicts, so only the label is hashed.
    value: Any = field(hash=False)
    # The caller's own branch mapping (not a copy); only set for anyOf/oneOf.
    schema: Optional[Mapping] = field(default=None, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {'label': self.label, 'value': self.value}
        if self.schema is not None:
            out['schema'] = self.schema
        return out


def enum_label(value: Any, index: int, enum_names) -> str:
    key = to_string_form(value)
    if is_sequence(enum_names):
        candidate = enum_names[index] if index < len(enum_names) else None
    elif isinstance(enum_names, Mapping):
        candidate = enum_names.get(key)
    else:
        candidate = None
    return first_label(fixed(candidate), value_label(value))


def build_enum_options(values: Sequence[Any], ui_options: Optional[UiOptions] = None) -> List[EnumOption]:
    ui_options = ui_options or UiOptions()
    options = [
        EnumOption(label=enum_label(value, i, ui_options.enum_names), value=value)
        for i, value in enumerate(values)
    ]
    if ui_options.enum_order is not None:
        options = apply_enum_order(options, ui_options.enum_order)
    return options


def resolve_selector_field(schema: Any, ui_options: UiOptions) -> Optional[str]:
    """Discriminator declared on the schema, unless the overlay names another field."""
    selector = get_discriminator_field(schema)
    if ui_options.options_schema_selector is not None:
        selector = ui_options.options_schema_selector
    return selector or None


def branch_option(branch: Any, branch_overlay: Any, selector: Optional[str]) -> EnumOption:
    overlay_title = get_ui_options(branch_overlay).title
    if selector:
        inner = get_in(branch, [PROPERTIES_KEY, selector], {})
        if not isinstance(inner, Mapping):
            inner = {}
        value = inner[DEFAULT_KEY] if DEFAULT_KEY in inner else inner.get(CONST_KEY)
        label = first_label(fixed(overlay_title), title_of(inner), title_of(branch), value_label(value))
    else:
        value = to_constant(branch)
        label = first_label(fixed(overlay_title), title_of(branch), value_label(value))
    return EnumOption(label=label, value=value, schema=branch)


def build_alternative_options(
    branches: Sequence[Schema],
    branch_overlays: Optional[Sequence[UiOverlay]],
    schema: Schema,
    ui_options: Optional[UiOptions] = None,
) -> List[EnumOption]:
    selector = resolve_selector_field(schema, ui_options or UiOptions())
    branch_overlays = branch_overlays if is_sequence(branch_overlays) else ()

    options: List[EnumOption] = []
    for i, branch in enumerate(branches):
        branch_overlay = branch_overlays[i] if i < len(branch_overlays) else None
        options.append(branch_option(branch, branch_overlay, selector))
    return options


def resolve_options(
    schema: Schema,
    ui_schema: Optional[UiOverlay] = None,
    global_options: Optional[Mapping] = None,
) -> Optional[List[EnumOption]]:
    """Return the selectable options described by ``schema``.

    ``None`` means the schema has no ``enum``, ``anyOf`` or ``oneOf`` and so
    nothing to choose from; it is not an error.
    """
    ui_options = get_ui_options(ui_schema, global_options)

    enum_values = get_sequence(schema, ENUM_KEY)
    if enum_values is not None:
        options = build_enum_options(enum_values, ui_options)
        logger.debug("Resolved %d enum options", len(options))
        return options

    for key in (ANY_OF_KEY, ONE_OF_KEY):
        branches = get_sequence(schema, key)
        if branches is not None:
            branch_overlays = get_sequence(ui_schema, key)
            options = build_alternative_options(branches, branch_overlays, schema, ui_options)
            logger.debug("Resolved %d %s options", len(options), key)
            return options

    return None


def resolve_field_options(
    schema: Schema,
    ui_schema: Optional[UiOverlay],
    path: str,
    global_options: Optional[Mapping] = None,
) -> Optional[List[EnumOption]]:
    """``resolve_options`` for the field at ``path`` of a larger form schema."""
    field_schema = get_subschema(schema, path)
    if field_schema is None:
        return None
    return resolve_options(field_schema, get_sub_overlay(ui_schema, path), global_options)
