from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Tuple

import dash
from dash import Input, Output

from infer_browser.core.exceptions import InferBrowserError
from infer_browser.services.model_service import ModelManager
from infer_browser.ui.ids import IDs
from infer_browser.ui.layout.build_model_panel import LOAD_LABEL, LOADED_LABEL, LOADING_LABEL

if TYPE_CHECKING:
    from infer_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def model_status(manager: ModelManager) -> dict:
    return {"loaded": manager.is_loaded, "path": str(manager.model_path)}


def load_button_state(manager: ModelManager) -> Tuple[str, bool]:
    """Button label + disabled flag for the current model state."""
    if manager.is_loading:
        return LOADING_LABEL, True
    if manager.is_loaded:
        return LOADED_LABEL, True
    return LOAD_LABEL, False


def load_model_action(manager: ModelManager) -> Tuple[dict, str]:
    """Load the model; returns (status, error line)."""
    try:
        manager.load()
    except InferBrowserError as e:
        return model_status(manager), f"Failed to load model: {e}"
    except Exception as e:
        logger.exception("Unexpected error while loading model")
        return model_status(manager), f"Failed to load model: {e}"

    return model_status(manager), ""


def register_model_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Button label / disabled state (also runs on page load)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MODEL_LOAD_BTN, "children"),
        Output(IDs.Control.MODEL_LOAD_BTN, "disabled"),
        Input(IDs.Store.MODEL_STATUS, "data"),
        Input(IDs.Store.PREDICT_STATUS, "data"),
    )
    def render_load_button(_status, _predict_status):
        return load_button_state(ctx.model_manager)

    # ---------------------------------------------------------
    # Explicit load
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.MODEL_STATUS, "data"),
        Output(IDs.Control.ERROR_TEXT, "children", allow_duplicate=True),
        Input(IDs.Control.MODEL_LOAD_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def load_model_clicked(n_clicks):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate
        return load_model_action(ctx.model_manager)
