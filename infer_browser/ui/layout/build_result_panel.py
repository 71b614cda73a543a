from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from infer_browser.ui.ids import IDs


def build_result_panel() -> dbc.Card:
    """
    Result card. Both the placeholder and the result body are always in the
    layout; callbacks toggle which one is visible.
    """
    return dbc.Card(
        [
            dbc.CardHeader(html.H5("Result", className="mb-0")),
            dbc.CardBody(
                [
                    html.P("No result yet.", id=IDs.Control.RESULT_EMPTY, className="text-muted"),
                    html.Div(
                        [
                            html.Pre(id=IDs.Control.RESULT_PRE, className="ib-result-pre"),
                            dbc.Button(
                                "Download Result",
                                id=IDs.Control.DOWNLOAD_RESULT_BTN,
                                color="light",
                                className="border mt-2",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_RESULT),
                        ],
                        id=IDs.Control.RESULT_BODY,
                        className="d-none",
                    ),
                ]
            ),
        ],
        className="ib-card",
    )
