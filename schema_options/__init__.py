"""Core logic for the Schema Options Inspector.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- resolve `enum` / `anyOf` / `oneOf` schemas into selectable options
- read label, order and selector directives from a UI schema overlay
- locate option-bearing fields inside a larger form schema
- flatten/export resolved options
"""
from .options_list import EnumOption, resolve_field_options, resolve_options
from .ui_options import UiOptions, get_ui_options

__all__ = [
    'EnumOption',
    'UiOptions',
    'get_ui_options',
    'resolve_field_options',
    'resolve_options',
]
