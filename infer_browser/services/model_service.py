from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, List, Optional

from infer_browser.core.exceptions import InputParseError
from infer_browser.core.model import LoadedModel, load_model
from infer_browser.core.preprocess import parse_vector, to_batch

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = (
    "Input parsing failed: please paste numbers or upload a file in the expected format."
)


class ModelManager:
    """
    Owns the single model instance for the app.

    The artifact is loaded lazily on first use and then kept for the lifetime
    of the process. Only one load runs at a time; callers that arrive while a
    load is in flight wait for it and reuse its result.
    """

    def __init__(self, model_path: Path, providers: Optional[List[str]] = None):
        self.model_path = Path(model_path)
        self.providers = providers
        self._model: Optional[LoadedModel] = None
        self._loading = False
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._model is not None

    @property
    def is_loading(self) -> bool:
        return self._loading

    def load(self) -> LoadedModel:
        # Fast path: already materialised
        if self._model is not None:
            return self._model

        with self._lock:
            if self._model is not None:
                return self._model

            self._loading = True
            try:
                model = load_model(self.model_path, self.providers)
            except Exception:
                logger.error("Model load failed", extra={"model": str(self.model_path)})
                raise
            finally:
                self._loading = False

            self._model = model
            return model

    def predict_text(self, text: Optional[str]) -> Any:
        model = self.load()

        values = parse_vector(text)
        if not values:
            raise InputParseError(EMPTY_INPUT_MESSAGE)

        logger.info("Running prediction", extra={"n_values": len(values)})
        return model.predict(to_batch(values))
