from schema_options.accessors import get_in, get_sub_overlay, get_subschema, is_sequence
from schema_options.paths import escape_segment, join_path, split_path
from schema_options.samples import sample_schema, sample_ui_schema
from schema_options.schema_utils import find_option_paths, has_options


def test_split_path_handles_escaped_dots():
    assert split_path('versions.v1\\.2.label') == ['versions', 'v1.2', 'label']
    assert split_path('a\\\\.b') == ['a\\', 'b']
    assert split_path('(root)') == []
    assert split_path('') == []
    assert split_path(None) == []


def test_join_path_escapes_segments():
    assert join_path(['versions', 'v1.2']) == 'versions.v1\\.2'
    assert join_path([]) == '(root)'
    assert split_path(join_path(['a.b', 'c\\d'])) == ['a.b', 'c\\d']
    assert escape_segment(3) == '3'


def test_get_in():
    data = {'a': [{'b': None}, {'b': 2}]}
    assert get_in(data, ['a', 1, 'b']) == 2
    assert get_in(data, ['a', 0, 'b'], 'fallback') is None
    assert get_in(data, ['a', 5, 'b'], 'fallback') == 'fallback'
    assert get_in(data, ['a', 'b'], 'fallback') == 'fallback'
    assert get_in('text', [0], 'fallback') == 'fallback'


def test_is_sequence():
    assert is_sequence([1])
    assert is_sequence((1,))
    assert not is_sequence('abc')
    assert not is_sequence({'a': 1})


def test_has_options():
    assert has_options({'enum': []})
    assert has_options({'oneOf': [{}]})
    assert not has_options({'enum': 'nope'})
    assert not has_options({'type': 'string'})


def test_find_option_paths_in_sample():
    assert find_option_paths(sample_schema()) == [
        'contact',
        'location',
        'pet',
        'priority',
        'rating',
        'tags.items',
    ]


def test_find_option_paths_reports_root_first():
    schema = {'enum': ['a'], 'properties': {'x': {'enum': [1]}}}
    assert find_option_paths(schema) == ['(root)']
    assert find_option_paths({'type': 'string'}) == []
    assert find_option_paths(None) == []


def test_find_option_paths_escapes_dotted_names():
    schema = {'properties': {'v1.2': {'properties': {'mode': {'anyOf': [{'const': 1}]}}}}}
    assert find_option_paths(schema) == ['v1\\.2.mode']
    assert get_subschema(schema, 'v1\\.2.mode') == schema['properties']['v1.2']['properties']['mode']


def test_subschema_and_overlay_walk_in_parallel():
    schema, ui_schema = sample_schema(), sample_ui_schema()
    assert get_subschema(schema, 'tags.items') == {'type': 'string', 'enum': ['red', 'green', 'blue']}
    assert get_sub_overlay(ui_schema, 'tags.items') == {'ui:widget': 'CheckboxesWidget'}
    assert get_subschema(schema, '(root)') is schema
    assert get_subschema(schema, 'rating.nope') is None
    assert get_sub_overlay(ui_schema, 'location.ui:enumNames') is None
    assert get_sub_overlay(None, 'rating') is None
