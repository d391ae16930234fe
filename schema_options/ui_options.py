"""Overlay directive access.

An overlay fragment carries presentation directives either as ``ui:<name>``
keys or bundled inside a ``ui:options`` mapping. ``get_ui_options`` folds both
into a single ``UiOptions`` model. Directives the resolver does not understand
are kept as extras; malformed values for the ones it does understand are
dropped rather than raised.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import UI_OPTIONS_KEY, UI_PREFIX
from .values import to_string_form

logger = logging.getLogger(__name__)


def _name_or_none(name):
    return name if isinstance(name, str) else None


class UiOptions(BaseModel):
    model_config = ConfigDict(extra='allow', frozen=True)

    title: Optional[str] = None
    enum_names: Optional[Union[List[Optional[str]], Dict[str, Optional[str]]]] = Field(
        default=None, alias='enumNames'
    )
    enum_order: Optional[List[Any]] = Field(default=None, alias='enumOrder')
    options_schema_selector: Optional[str] = Field(default=None, alias='optionsSchemaSelector')
    widget: Optional[str] = None

    @field_validator('enum_names', mode='before')
    @classmethod
    def _normalise_name_table(cls, value):
        # A bad entry only loses its own label, not the whole table.
        if isinstance(value, Mapping):
            return {to_string_form(k): _name_or_none(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [_name_or_none(v) for v in value]
        return value

    @field_validator('title', 'enum_names', 'enum_order', 'options_schema_selector', 'widget', mode='wrap')
    @classmethod
    def _absent_when_malformed(cls, value, handler, info):
        try:
            return handler(value)
        except ValidationError:
            logger.debug("Ignoring malformed %s directive: %r", info.field_name, value)
            return None


def collect_ui_directives(overlay: Any, global_options: Optional[Mapping] = None) -> Dict[str, Any]:
    """Merge ``ui:`` keys and ``ui:options`` of ``overlay`` over ``global_options``.

    Keys are applied in mapping order, so a later ``ui:title`` overrides an
    earlier ``ui:options.title`` and vice versa.
    """
    directives: Dict[str, Any] = dict(global_options or {})
    if not isinstance(overlay, Mapping):
        return directives

    for key, value in overlay.items():
        if not isinstance(key, str) or not key.startswith(UI_PREFIX):
            continue
        if key == UI_OPTIONS_KEY and isinstance(value, Mapping):
            directives.update(value)
        else:
            directives[key[len(UI_PREFIX):]] = value
    return directives


def get_ui_options(overlay: Any = None, global_options: Optional[Mapping] = None) -> UiOptions:
    """Return the recognized directives of an overlay fragment.

    A missing fragment yields a model with every directive absent.
    """
    directives = collect_ui_directives(overlay, global_options)
    # Extras must have string names for pydantic; anything else is noise.
    directives = {k: v for k, v in directives.items() if isinstance(k, str)}
    return UiOptions.model_validate(directives)
