import pytest

from schema_options.values import to_constant, to_string_form


@pytest.mark.parametrize('value, expected', [
    ('x', 'x'),
    ('', ''),
    (None, 'null'),
    (True, 'true'),
    (False, 'false'),
    (3, '3'),
    (3.0, '3'),
    (2.5, '2.5'),
    (-0.5, '-0.5'),
    (0.000001, '0.000001'),
    (1e-07, '1e-7'),
    (1.5e-10, '1.5e-10'),
    (1e16, '10000000000000000'),
    (1e21, '1e+21'),
    (-1.5e21, '-1.5e+21'),
    (float('inf'), 'Infinity'),
    (float('nan'), 'NaN'),
    ({'name': 'Amsterdam', 'lat': 52}, '{"name":"Amsterdam","lat":52}'),
    (['a', 1], '["a",1]'),
])
def test_string_form(value, expected):
    assert to_string_form(value) == expected


def test_const_beats_single_enum():
    assert to_constant({'const': 'a', 'enum': ['b']}) == 'a'


def test_const_none_is_a_constant():
    assert to_constant({'const': None, 'enum': ['b']}) is None
    assert to_constant({'enum': [None]}) is None


def test_single_enum_entry():
    assert to_constant({'enum': [7]}) == 7


@pytest.mark.parametrize('schema', [{}, {'enum': []}, {'enum': [1, 2]}, {'type': 'string'}, None, 'x'])
def test_no_constant(schema):
    assert to_constant(schema) is None
