from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        RESULT = "result-store"
        MODEL_STATUS = "model-status"
        PREDICT_STATUS = "predict-status"

    class Control:
        # Model card
        MODEL_PATH_TEXT = "model-path-text"
        MODEL_LOAD_BTN = "model-load-btn"
        MODEL_LOADING = "model-loading"

        # Input card
        INPUT_TEXT = "input-text"
        INPUT_UPLOAD = "input-upload"
        PREDICT_BTN = "predict-btn"
        CLEAR_BTN = "clear-btn"
        ERROR_TEXT = "error-text"

        # Result card
        RESULT_EMPTY = "result-empty"
        RESULT_BODY = "result-body"
        RESULT_PRE = "result-pre"
        DOWNLOAD_RESULT_BTN = "download-result-btn"
        DOWNLOAD_RESULT = "download-result"
