from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Any

import gradio as gr

from .accessors import get_sub_overlay, get_subschema
from .constants import ROOT_PATH
from .flattening import options_to_choices, options_to_table, widget_kind, write_options
from .io_utils import parse_json_text, read_json_content
from .options_list import resolve_options
from .samples import sample_schema, sample_ui_schema
from .schema_utils import find_option_paths
from .ui_options import get_ui_options

logger = logging.getLogger(__name__)


def dump_json_text(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def load_sample_handler():
    return dump_json_text(sample_schema()), dump_json_text(sample_ui_schema()), "Loaded sample schema."


def load_json_file_handler(file_obj, label="Schema"):
    if file_obj is None:
        return gr.update(), f"{label}: No file uploaded."
    try:
        data = read_json_content(file_obj)
    except ValueError as e:
        return gr.update(), f"{label}: Error parsing JSON: {str(e)}"
    return dump_json_text(data), f"{label}: Successfully loaded."


def load_schema_file_handler(file_obj):
    return load_json_file_handler(file_obj, "Schema")


def load_ui_schema_file_handler(file_obj):
    return load_json_file_handler(file_obj, "UI schema")


def analyze_schema_handler(schema_text, ui_schema_text):
    """Parse both editors and list the locations that resolve to options."""
    try:
        schema = parse_json_text(schema_text, "Schema")
        ui_schema = parse_json_text(ui_schema_text, "UI schema", allow_empty=True)
    except ValueError as e:
        return None, None, gr.update(choices=[], value=None), str(e)

    paths = find_option_paths(schema)
    if not paths:
        return schema, ui_schema, gr.update(choices=[], value=None), "No enum, anyOf or oneOf found."

    default_path = ROOT_PATH if ROOT_PATH in paths else paths[0]
    status = f"Found {len(paths)} option field(s)."
    return schema, ui_schema, gr.update(choices=paths, value=default_path), status


def _preview_updates(options, kind):
    choices = options_to_choices(options)
    return (
        gr.update(choices=choices, value=None, visible=kind == 'select'),
        gr.update(choices=choices, value=None, visible=kind == 'radio'),
        gr.update(choices=choices, value=[], visible=kind == 'checkboxes'),
    )


def resolve_path_handler(schema, ui_schema, path):
    """Resolve the options at ``path`` and feed the table, JSON and widget previews."""
    empty = ([], None) + _preview_updates([], 'select')
    if schema is None:
        return empty + ("No schema loaded.",)

    field_schema = get_subschema(schema, path or ROOT_PATH)
    if field_schema is None:
        return empty + (f"No schema found at {path}.",)

    field_overlay = get_sub_overlay(ui_schema, path or ROOT_PATH)
    options = resolve_options(field_schema, field_overlay)
    if options is None:
        return empty + (f"{path} has no options.",)

    kind = widget_kind(get_ui_options(field_overlay))
    logger.info("Resolved %d options at %s (%s)", len(options), path, kind)
    preview = [opt.to_dict() for opt in options]
    return (options_to_table(options), preview) + _preview_updates(options, kind) + (
        f"{len(options)} option(s) rendered as {kind}.",
    )


def export_options_handler(schema, ui_schema, path, output_format, file_name):
    if schema is None:
        return None, "No schema loaded."

    field_schema = get_subschema(schema, path or ROOT_PATH)
    options = resolve_options(field_schema, get_sub_overlay(ui_schema, path or ROOT_PATH)) if field_schema else None
    if not options:
        return None, "No options to export."

    if not file_name or not file_name.strip():
        file_name = "options"

    ext = f".{output_format.lower()}"
    if not file_name.lower().endswith(ext):
        file_name += ext

    out_path = os.path.join(tempfile.gettempdir(), file_name)
    try:
        write_options(options, out_path, output_format)
    except OSError as e:
        return None, f"Error during export: {str(e)}"
    return out_path, f"Export successful! Saved to {out_path}"
