import json

import numpy as np

from infer_browser.services.model_service import EMPTY_INPUT_MESSAGE, ModelManager
from infer_browser.ui.callbacks.callbacks_model import load_button_state
from infer_browser.ui.callbacks.callbacks_predict import run_prediction
from infer_browser.ui.dash_app import create_dash_app
from infer_browser.ui.ids import IDs


def _collect_ids(component, found=None):
    found = set() if found is None else found
    cid = getattr(component, "id", None)
    if isinstance(cid, str):
        found.add(cid)
    children = getattr(component, "children", None)
    if children is None:
        return found
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        if hasattr(child, "to_plotly_json"):
            _collect_ids(child, found)
    return found


def test_create_dash_app_builds_single_screen(tmp_path, monkeypatch, linear_model_path):
    monkeypatch.delenv("INFER_BROWSER_MODEL_PATH", raising=False)
    (tmp_path / "global.json").write_text(
        json.dumps({"ui_title": "Test Demo", "model_path": str(linear_model_path)})
    )

    app = create_dash_app(tmp_path)

    assert app.title == "Test Demo"
    ids = _collect_ids(app.layout)
    for expected in (
        IDs.Store.RESULT,
        IDs.Store.MODEL_STATUS,
        IDs.Control.MODEL_LOAD_BTN,
        IDs.Control.INPUT_TEXT,
        IDs.Control.INPUT_UPLOAD,
        IDs.Control.PREDICT_BTN,
        IDs.Control.CLEAR_BTN,
        IDs.Control.ERROR_TEXT,
        IDs.Control.RESULT_PRE,
        IDs.Control.DOWNLOAD_RESULT_BTN,
        IDs.Control.DOWNLOAD_RESULT,
    ):
        assert expected in ids


def test_create_dash_app_does_not_load_model(tmp_path, linear_model_path):
    manager = ModelManager(linear_model_path)

    create_dash_app(tmp_path, model_manager=manager)

    assert manager.is_loaded is False


def test_load_button_state_follows_manager(linear_model_path):
    manager = ModelManager(linear_model_path)
    assert load_button_state(manager) == ("Load Model", False)

    manager.load()
    assert load_button_state(manager) == ("Model Loaded", True)


def test_run_prediction_success(linear_model_path):
    result, error = run_prediction(ModelManager(linear_model_path), "1 2 3")

    assert error == ""
    assert np.allclose(result, [[4.5, 4.5]])


def test_run_prediction_reports_parse_and_load_errors(tmp_path, linear_model_path):
    result, error = run_prediction(ModelManager(linear_model_path), "   ")
    assert result is None
    assert error == EMPTY_INPUT_MESSAGE

    result, error = run_prediction(ModelManager(tmp_path / "missing.onnx"), "1 2 3")
    assert result is None
    assert "not found" in error
