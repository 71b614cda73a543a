from __future__ import annotations

from typing import TYPE_CHECKING, Any, Tuple

import dash
from dash import Input, Output, State, dcc

from infer_browser.services.export_service import RESULT_FILENAME, format_result, result_payload
from infer_browser.ui.ids import IDs

if TYPE_CHECKING:
    from infer_browser.ui.config import AppConfig


def result_view(result: Any) -> Tuple[str, str, str]:
    """(placeholder className, result body className, formatted result)"""
    if result is None:
        return "text-muted", "d-none", ""
    return "d-none", "", format_result(result)


def result_download(n_clicks, result: Any) -> dict:
    if not n_clicks or result is None:
        raise dash.exceptions.PreventUpdate
    return dcc.send_string(result_payload(result), RESULT_FILENAME)


def register_result_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.RESULT_EMPTY, "className"),
        Output(IDs.Control.RESULT_BODY, "className"),
        Output(IDs.Control.RESULT_PRE, "children"),
        Input(IDs.Store.RESULT, "data"),
    )
    def render_result(result):
        return result_view(result)

    @app.callback(
        Output(IDs.Control.DOWNLOAD_RESULT, "data"),
        Input(IDs.Control.DOWNLOAD_RESULT_BTN, "n_clicks"),
        State(IDs.Store.RESULT, "data"),
        prevent_initial_call=True,
    )
    def download_result(n_clicks, result):
        return result_download(n_clicks, result)
