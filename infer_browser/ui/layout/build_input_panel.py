from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from infer_browser.config.model import GlobalConfig
from infer_browser.ui.ids import IDs


def build_input_panel(global_config: GlobalConfig) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(html.H5("Input", className="mb-0")),
            dbc.CardBody(
                [
                    html.P(
                        "Paste numeric vector (space-separated) matching model input.",
                        className="text-muted mb-2",
                    ),
                    dbc.Textarea(
                        id=IDs.Control.INPUT_TEXT,
                        value="",
                        rows=6,
                        placeholder=global_config.input_placeholder,
                        className="ib-textarea",
                    ),
                    dcc.Upload(
                        id=IDs.Control.INPUT_UPLOAD,
                        children=html.Div(["Or drag and drop / ", html.A("select a text file")]),
                        multiple=False,
                        className="border rounded p-2 text-center small mt-2",
                    ),
                    html.Div(
                        [
                            dbc.Button(
                                "Predict",
                                id=IDs.Control.PREDICT_BTN,
                                color="primary",
                                className="me-2",
                            ),
                            dbc.Button(
                                "Clear",
                                id=IDs.Control.CLEAR_BTN,
                                color="light",
                                className="border",
                            ),
                        ],
                        className="mt-2",
                    ),
                    html.P(id=IDs.Control.ERROR_TEXT, className="text-danger mt-2 mb-0"),
                ]
            ),
        ],
        className="ib-card",
    )
