from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from infer_browser.config.model import GlobalConfig
from infer_browser.ui.ids import IDs

LOAD_LABEL = "Load Model"
LOADING_LABEL = "Loading..."
LOADED_LABEL = "Model Loaded"


def build_model_panel(global_config: GlobalConfig) -> dbc.Card:
    """
    Model card: configured artifact path + the load button.

    While a load is running the button is swapped for a disabled
    "Loading..." placeholder by the surrounding dcc.Loading.
    """
    return dbc.Card(
        [
            dbc.CardHeader(html.H5("Model", className="mb-0")),
            dbc.CardBody(
                [
                    html.P(
                        ["Model path: ", html.Code(str(global_config.model_path), id=IDs.Control.MODEL_PATH_TEXT)],
                        className="mt-1",
                    ),
                    dcc.Loading(
                        id=IDs.Control.MODEL_LOADING,
                        custom_spinner=dbc.Button(
                            LOADING_LABEL,
                            color="light",
                            disabled=True,
                            className="border",
                        ),
                        children=[
                            dbc.Button(
                                LOAD_LABEL,
                                id=IDs.Control.MODEL_LOAD_BTN,
                                color="light",
                                className="border me-2",
                            ),
                            dcc.Store(id=IDs.Store.MODEL_STATUS),
                        ],
                    ),
                ]
            ),
        ],
        className="ib-card",
    )
