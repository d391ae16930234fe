from __future__ import annotations

import csv
import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .options_list import EnumOption
from .ui_options import UiOptions
from .values import to_string_form

ROW_HEADERS = ['label', 'value', 'value_key', 'has_schema']

_WIDGET_KINDS = {
    'radiowidget': 'radio',
    'radio': 'radio',
    'checkboxeswidget': 'checkboxes',
    'checkboxes': 'checkboxes',
}


def options_to_rows(options: Optional[Sequence[EnumOption]]) -> List[Dict[str, Any]]:
    """Flatten options into table rows; the branch schema is reduced to a flag."""
    if not options:
        return []
    rows: List[Dict[str, Any]] = []
    for opt in options:
        value = opt.value
        if isinstance(value, (dict, list)):
            value = to_string_form(value)
        rows.append({
            'label': opt.label,
            'value': value,
            'value_key': to_string_form(opt.value),
            'has_schema': opt.schema is not None,
        })
    return rows


def options_to_choices(options: Optional[Sequence[EnumOption]]) -> List[Tuple[str, str]]:
    """``(label, key)`` pairs for selection widgets; keys are string forms."""
    return [(opt.label, to_string_form(opt.value)) for opt in options or []]


def widget_kind(ui_options: Optional[UiOptions]) -> str:
    widget = (ui_options.widget if ui_options is not None else None) or ''
    return _WIDGET_KINDS.get(widget.lower(), 'select')


def write_options(options: Sequence[EnumOption], path: str, output_format: str = 'CSV') -> str:
    """Write resolved options to ``path`` as CSV rows or a JSON list."""
    if output_format == 'CSV':
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=ROW_HEADERS)
            writer.writeheader()
            writer.writerows(options_to_rows(options))
    else:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump([opt.to_dict() for opt in options], f, indent=2, ensure_ascii=False)
    return path


TABLE_HEADERS = ['Label', 'Value', 'Type', 'Branch Schema']


def _type_name(value: Any) -> str:
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, dict):
        return 'object'
    if isinstance(value, list):
        return 'array'
    return type(value).__name__


def options_to_table(options: Optional[Sequence[EnumOption]]) -> List[List[Any]]:
    """Rows for a ``gr.Dataframe`` with ``TABLE_HEADERS`` columns."""
    return [
        [opt.label, to_string_form(opt.value), _type_name(opt.value), 'yes' if opt.schema is not None else 'no']
        for opt in options or []
    ]
