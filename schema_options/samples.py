"""Sample form schema and overlay exercising every option-naming mechanism."""
from __future__ import annotations

import copy

_LOCATION_NAMES = {'ui:enumNames': ['New York', 'Amsterdam', 'Hong Kong']}

_SCHEMA = {
    'type': 'object',
    'properties': {
        'location': {
            'title': 'Location',
            'enum': [
                {'name': 'New York', 'lat': 40, 'lon': 74},
                {'name': 'Amsterdam', 'lat': 52, 'lon': 5},
                {'name': 'Hong Kong', 'lat': 22, 'lon': 114},
            ],
        },
        'rating': {
            'title': 'Rating (map-based enumNames)',
            'type': 'number',
            'enum': [1, 2, 3, 4, 5],
        },
        'priority': {
            'title': 'Priority (enumOrder)',
            'type': 'string',
            'enum': ['low', 'medium', 'high', 'critical'],
        },
        'tags': {
            'title': 'Tags',
            'type': 'array',
            'uniqueItems': True,
            'items': {'type': 'string', 'enum': ['red', 'green', 'blue']},
        },
        'contact': {
            'title': 'Contact method',
            'oneOf': [
                {'const': 'email', 'title': 'E-mail'},
                {'const': 'phone'},
                {'enum': ['post']},
            ],
        },
        'pet': {
            'title': 'Pet',
            'discriminator': {'propertyName': 'animal'},
            'anyOf': [
                {
                    'type': 'object',
                    'title': 'Dog',
                    'properties': {'animal': {'type': 'string', 'const': 'dog'}},
                },
                {
                    'type': 'object',
                    'properties': {'animal': {'type': 'string', 'title': 'Fish', 'const': 'fish'}},
                },
                {
                    'type': 'object',
                    'properties': {'animal': {'type': 'string', 'default': 'cat'}},
                },
            ],
        },
    },
}

_UI_SCHEMA = {
    'location': dict(_LOCATION_NAMES),
    'rating': {
        'ui:widget': 'RadioWidget',
        'ui:enumNames': {'1': 'Terrible', '2': 'Poor', '3': 'Average', '4': 'Good', '5': 'Excellent'},
    },
    'priority': {
        'ui:enumNames': {
            'low': 'Low priority',
            'medium': 'Medium priority',
            'high': 'High priority',
            'critical': 'Critical priority',
        },
        'ui:enumOrder': ['critical', 'high', '*'],
    },
    'tags': {'items': {'ui:widget': 'CheckboxesWidget'}},
    'contact': {'oneOf': [{}, {'ui:title': 'Telephone'}]},
    'pet': {'anyOf': [{}, {}, {'ui:title': 'Cat'}]},
}


def sample_schema():
    return copy.deepcopy(_SCHEMA)


def sample_ui_schema():
    return copy.deepcopy(_UI_SCHEMA)
