from __future__ import annotations

from typing import Any, Dict, List, TypedDict, Union

Discriminator = TypedDict('Discriminator', {'propertyName': str}, total=False)

# Only the keywords the options resolver reads are listed; schemas are free to
# carry anything else.
Schema = TypedDict(
    'Schema',
    {
        'title': str,
        'enum': List[Any],
        'const': Any,
        'default': Any,
        'oneOf': List['Schema'],
        'anyOf': List['Schema'],
        'properties': Dict[str, 'Schema'],
        'items': 'Schema',
        'discriminator': Discriminator,
    },
    total=False,
)

# Overlay fragments are keyed by directive ("ui:enumNames", "ui:options", ...)
# and by property name for nested fields; "oneOf"/"anyOf" hold one fragment per
# branch, index-aligned with the schema's alternatives.
UiOverlay = TypedDict(
    'UiOverlay',
    {
        'ui:options': Dict[str, Any],
        'ui:enumNames': Union[List[str], Dict[str, str]],
        'ui:enumOrder': List[Any],
        'ui:title': str,
        'ui:optionsSchemaSelector': str,
        'ui:widget': str,
        'oneOf': List['UiOverlay'],
        'anyOf': List['UiOverlay'],
        'items': 'UiOverlay',
    },
    total=False,
)
