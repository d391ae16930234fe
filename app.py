import logging
import os

import gradio as gr

from schema_options.handlers import (
    analyze_schema_handler,
    export_options_handler,
    load_sample_handler,
    load_schema_file_handler,
    load_ui_schema_file_handler,
    resolve_path_handler,
)
from schema_options.flattening import TABLE_HEADERS

logging.basicConfig(
    level=os.environ.get("SCHEMA_OPTIONS_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# --- UI Definition ---
with gr.Blocks(title="Schema Options Inspector") as demo:
    gr.Markdown("# Schema Options Inspector")
    gr.Markdown(
        "Paste or upload a JSON schema and its UI schema, pick a field with `enum`, `anyOf` or `oneOf`, "
        "and see the options a selection control would show."
    )

    # State
    schema_state = gr.State()
    ui_schema_state = gr.State()

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Schemas")
            sample_btn = gr.Button("Load Sample")
            with gr.Row():
                schema_file = gr.File(label="Upload Schema", file_types=[".json"])
                ui_schema_file = gr.File(label="Upload UI Schema", file_types=[".json"])
            schema_text = gr.Code(label="Schema", language="json", value="{}")
            ui_schema_text = gr.Code(label="UI Schema", language="json", value="{}")
            analyze_btn = gr.Button("Analyze", variant="primary")
            status_msg = gr.Textbox(label="Status", interactive=False)

        # Right Panel: Options
        with gr.Column(scale=1):
            gr.Markdown("### 2. Field")
            path_selector = gr.Dropdown(
                label="Option Field Path",
                choices=[],
                value=None,
                allow_custom_value=True,
                interactive=True,
            )

            gr.Markdown("### 3. Resolved Options")
            options_table = gr.Dataframe(
                headers=TABLE_HEADERS,
                datatype=["str", "str", "str", "str"],
                col_count=(4, "fixed"),
                interactive=False,
                label="Options",
            )
            options_json = gr.JSON(label="Options (JSON)")

            gr.Markdown("### 4. Control Preview")
            select_preview = gr.Dropdown(label="Select", choices=[], interactive=True)
            radio_preview = gr.Radio(label="Radio", choices=[], visible=False)
            checkbox_preview = gr.CheckboxGroup(label="Checkboxes", choices=[], visible=False)

            gr.Markdown("### 5. Export")
            output_format = gr.Radio(choices=["CSV", "JSON"], value="CSV", label="Output Format")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="options")
            export_btn = gr.Button("Export Options")
            download_output = gr.File(label="Download Result")

    sample_btn.click(
        fn=load_sample_handler,
        inputs=[],
        outputs=[schema_text, ui_schema_text, status_msg],
    )

    schema_file.upload(
        fn=load_schema_file_handler,
        inputs=[schema_file],
        outputs=[schema_text, status_msg],
    )

    ui_schema_file.upload(
        fn=load_ui_schema_file_handler,
        inputs=[ui_schema_file],
        outputs=[ui_schema_text, status_msg],
    )

    analyze_btn.click(
        fn=analyze_schema_handler,
        inputs=[schema_text, ui_schema_text],
        outputs=[schema_state, ui_schema_state, path_selector, status_msg],
    )

    path_selector.change(
        fn=resolve_path_handler,
        inputs=[schema_state, ui_schema_state, path_selector],
        outputs=[options_table, options_json, select_preview, radio_preview, checkbox_preview, status_msg],
    )

    export_btn.click(
        fn=export_options_handler,
        inputs=[schema_state, ui_schema_state, path_selector, output_format, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
