import csv
import json

from schema_options.flattening import (
    ROW_HEADERS,
    options_to_choices,
    options_to_rows,
    options_to_table,
    widget_kind,
    write_options,
)
from schema_options.options_list import EnumOption
from schema_options.ui_options import UiOptions

BRANCH = {'const': 'dog'}
OPTIONS = [
    EnumOption(label='One', value=1),
    EnumOption(label='Amsterdam', value={'name': 'Amsterdam'}),
    EnumOption(label='Dog', value='dog', schema=BRANCH),
]


def test_options_to_rows():
    assert options_to_rows(OPTIONS) == [
        {'label': 'One', 'value': 1, 'value_key': '1', 'has_schema': False},
        {'label': 'Amsterdam', 'value': '{"name":"Amsterdam"}', 'value_key': '{"name":"Amsterdam"}', 'has_schema': False},
        {'label': 'Dog', 'value': 'dog', 'value_key': 'dog', 'has_schema': True},
    ]
    assert options_to_rows(None) == []


def test_options_to_choices():
    assert options_to_choices(OPTIONS) == [('One', '1'), ('Amsterdam', '{"name":"Amsterdam"}'), ('Dog', 'dog')]
    assert options_to_choices(None) == []


def test_options_to_table():
    assert options_to_table(OPTIONS) == [
        ['One', '1', 'number', 'no'],
        ['Amsterdam', '{"name":"Amsterdam"}', 'object', 'no'],
        ['Dog', 'dog', 'string', 'yes'],
    ]


def test_widget_kind():
    assert widget_kind(UiOptions(widget='RadioWidget')) == 'radio'
    assert widget_kind(UiOptions(widget='checkboxes')) == 'checkboxes'
    assert widget_kind(UiOptions(widget='SelectWidget')) == 'select'
    assert widget_kind(UiOptions()) == 'select'
    assert widget_kind(None) == 'select'


def test_write_options_csv(tmp_path):
    path = write_options(OPTIONS, str(tmp_path / 'options.csv'), 'CSV')
    with open(path, newline='', encoding='utf-8') as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0].keys()) == ROW_HEADERS
    assert [r['label'] for r in rows] == ['One', 'Amsterdam', 'Dog']
    assert rows[2]['has_schema'] == 'True'


def test_write_options_json(tmp_path):
    path = write_options(OPTIONS, str(tmp_path / 'options.json'), 'JSON')
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    assert data == [
        {'label': 'One', 'value': 1},
        {'label': 'Amsterdam', 'value': {'name': 'Amsterdam'}},
        {'label': 'Dog', 'value': 'dog', 'schema': {'const': 'dog'}},
    ]
