from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from infer_browser.ui.ids import IDs
from infer_browser.ui.layout.build_input_panel import build_input_panel
from infer_browser.ui.layout.build_model_panel import build_model_panel
from infer_browser.ui.layout.build_navbar import build_navbar
from infer_browser.ui.layout.build_result_panel import build_result_panel

if TYPE_CHECKING:
    from infer_browser.ui.config import AppConfig


def build_layout(ctx: "AppConfig") -> dbc.Container:
    global_config = ctx.global_config

    return dbc.Container(
        fluid=True,
        className="ib-root",
        children=[
            build_navbar(global_config),

            # Result lives in the browser only
            dcc.Store(id=IDs.Store.RESULT, storage_type="memory"),
            # Written by Predict; must stay outside the model card's dcc.Loading
            dcc.Store(id=IDs.Store.PREDICT_STATUS, storage_type="memory"),

            html.Main(
                dbc.Stack(
                    [
                        build_model_panel(global_config),
                        build_input_panel(global_config),
                        build_result_panel(),
                    ],
                    gap=3,
                ),
                className="ib-main px-4",
            ),

            html.Footer(
                html.Small(
                    [
                        "Minimal demo • Put your ONNX model at ",
                        html.Code(str(global_config.model_path)),
                    ]
                ),
                className="ib-footer",
            ),
        ],
    )
