import io

import pytest

from schema_options.io_utils import parse_json_text, read_json_content


def test_read_json_from_file_like():
    assert read_json_content(io.BytesIO(b'{"enum": [1]}')) == {'enum': [1]}
    assert read_json_content(io.StringIO('[1, 2]')) == [1, 2]


def test_read_json_from_path(tmp_path):
    path = tmp_path / 'schema.json'
    path.write_text('{"oneOf": []}', encoding='utf-8')
    assert read_json_content(str(path)) == {'oneOf': []}


def test_read_json_requires_a_file():
    with pytest.raises(ValueError, match='No file uploaded'):
        read_json_content(None)


def test_parse_json_text():
    assert parse_json_text('{"a": 1}') == {'a': 1}
    assert parse_json_text('   ', allow_empty=True) is None


def test_parse_json_text_errors():
    with pytest.raises(ValueError, match='Schema is empty'):
        parse_json_text('', 'Schema')
    with pytest.raises(ValueError, match='UI schema is not valid JSON'):
        parse_json_text('{nope', 'UI schema')
