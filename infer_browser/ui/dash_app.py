from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from infer_browser.config.loader import load_global_config
from infer_browser.services.model_service import ModelManager
from infer_browser.ui.layout.build_layout import build_layout
from infer_browser.ui.callbacks.callbacks_model import register_model_callbacks
from infer_browser.ui.callbacks.callbacks_predict import register_predict_callbacks
from infer_browser.ui.callbacks.callbacks_result import register_result_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
        config_root: Path | str = Path("config"),
        model_manager: Optional[ModelManager] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Model service (lazy: nothing is loaded until the user asks)
    if model_manager is None:
        model_manager = ModelManager(global_config.model_path, global_config.providers)

    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        model_manager=model_manager,
    )

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    register_model_callbacks(app, ctx)
    register_predict_callbacks(app, ctx)
    register_result_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "model_path": str(model_manager.model_path)},
    )
    return app
