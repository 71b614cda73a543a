from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
from dash import Input, Output, State, no_update

from infer_browser.core.exceptions import InferBrowserError
from infer_browser.services.model_service import ModelManager
from infer_browser.ui.callbacks.callbacks_model import model_status
from infer_browser.ui.helpers import decode_text_upload
from infer_browser.ui.ids import IDs

if TYPE_CHECKING:
    from infer_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def run_prediction(manager: ModelManager, text: Optional[str]) -> Tuple[Any, str]:
    """
    Returns (result, error). Exactly one of them is meaningful: result is None
    whenever error is non-empty.
    """
    try:
        return manager.predict_text(text), ""
    except InferBrowserError as e:
        return None, str(e)
    except Exception as e:
        logger.exception("Unexpected prediction failure")
        return None, str(e) or type(e).__name__


def clear_input_value(n_clicks: Optional[int]) -> str:
    if not n_clicks:
        raise dash.exceptions.PreventUpdate
    return ""


def read_input_upload(contents: Optional[str], filename: Optional[str]) -> Tuple[Any, str, None]:
    """
    Returns (textarea value, error, upload contents).

    The upload contents are always reset so picking the same file again fires
    the callback again. On a bad file the textarea is left untouched.
    """
    if contents is None:
        raise dash.exceptions.PreventUpdate

    try:
        text = decode_text_upload(contents)
    except ValueError as e:
        logger.warning("Rejected input upload", extra={"upload_filename": filename, "error": str(e)})
        return no_update, f"Could not read {filename or 'uploaded file'}: {e}", None

    logger.info("Input loaded from file", extra={"upload_filename": filename, "n_chars": len(text)})
    return text, "", None


def register_predict_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Predict (loads the model on demand). Writes PREDICT_STATUS, which sits
    # outside the model card's dcc.Loading.
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.RESULT, "data"),
        Output(IDs.Control.ERROR_TEXT, "children", allow_duplicate=True),
        Output(IDs.Store.PREDICT_STATUS, "data"),
        Input(IDs.Control.PREDICT_BTN, "n_clicks"),
        State(IDs.Control.INPUT_TEXT, "value"),
        prevent_initial_call=True,
    )
    def predict(n_clicks, text):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate

        result, error = run_prediction(ctx.model_manager, text)
        return result, error, model_status(ctx.model_manager)

    # ---------------------------------------------------------
    # Clear input
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.INPUT_TEXT, "value", allow_duplicate=True),
        Input(IDs.Control.CLEAR_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def clear_input(n_clicks):
        return clear_input_value(n_clicks)

    # ---------------------------------------------------------
    # Fill input from an uploaded text file
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.INPUT_TEXT, "value", allow_duplicate=True),
        Output(IDs.Control.ERROR_TEXT, "children", allow_duplicate=True),
        Output(IDs.Control.INPUT_UPLOAD, "contents"),
        Input(IDs.Control.INPUT_UPLOAD, "contents"),
        State(IDs.Control.INPUT_UPLOAD, "filename"),
        prevent_initial_call=True,
    )
    def load_input_file(contents, filename):
        return read_input_upload(contents, filename)
