from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence

import numpy as np
import onnxruntime as ort

from infer_browser.core.exceptions import InputShapeError, ModelLoadError, PredictionError

logger = logging.getLogger(__name__)

DEFAULT_PROVIDERS = ["CPUExecutionProvider"]

# Input element types we know how to feed; anything else gets float32.
_INPUT_DTYPES = {
    "tensor(float)": np.float32,
    "tensor(double)": np.float64,
    "tensor(float16)": np.float16,
}


def _to_nested(value: Any) -> Any:
    """Turn a runtime output (ndarray, sequence of maps, ...) into plain lists."""
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, (list, tuple)):
        return [_to_nested(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _to_nested(v) for k, v in value.items()}
    if isinstance(value, np.generic):
        return value.item()
    return value


class LoadedModel:
    """
    Thin wrapper around an onnxruntime session.

    The session is treated as a black box: one input tensor in, one or more
    output tensors out.
    """

    def __init__(self, session: ort.InferenceSession, source: Path):
        self._session = session
        self.source = source

        inputs = session.get_inputs()
        if not inputs:
            raise ModelLoadError(f"Model at {source} declares no inputs")

        first = inputs[0]
        self.input_name: str = first.name
        self.input_type: str = first.type
        self.input_shape: List[Any] = list(first.shape or [])
        self.output_names: List[str] = [o.name for o in session.get_outputs()]

    @property
    def input_width(self) -> Optional[int]:
        """Fixed size of the last input dimension, or None when it is symbolic."""
        if not self.input_shape:
            return None
        last = self.input_shape[-1]
        return last if isinstance(last, int) and last > 0 else None

    def prepare(self, batch: np.ndarray) -> np.ndarray:
        width = self.input_width
        if width is not None and batch.shape[-1] != width:
            raise InputShapeError(
                f"Model expects {width} values per row, got {batch.shape[-1]}"
            )
        dtype = _INPUT_DTYPES.get(self.input_type, np.float32)
        return batch.astype(dtype, copy=False)

    def predict(self, batch: np.ndarray) -> Any:
        """
        Run one forward pass.

        Returns the nested list of the output tensor when the model has a single
        output, otherwise a list with one nested list per output.
        """
        feed = {self.input_name: self.prepare(batch)}

        try:
            outputs: Sequence[Any] = self._session.run(None, feed)
        except Exception as e:
            logger.exception(
                "Forward pass failed",
                extra={"model": str(self.source), "input_shape": list(batch.shape)},
            )
            raise PredictionError(str(e)) from e

        if len(outputs) == 1:
            return _to_nested(outputs[0])
        return [_to_nested(o) for o in outputs]


def load_model(path: Path | str, providers: Optional[List[str]] = None) -> LoadedModel:
    path = Path(path)
    if not path.is_file():
        raise ModelLoadError(f"Model file not found at {path}")

    providers = list(providers or DEFAULT_PROVIDERS)
    logger.info("Loading model", extra={"model": str(path), "providers": providers})

    try:
        session = ort.InferenceSession(str(path), providers=providers)
    except Exception as e:
        logger.error("Runtime rejected model", extra={"model": str(path), "error": str(e)})
        raise ModelLoadError(str(e)) from e

    model = LoadedModel(session, path)
    logger.info(
        "Model loaded",
        extra={
            "model": str(path),
            "input_name": model.input_name,
            "input_shape": [str(d) for d in model.input_shape],
            "outputs": model.output_names,
        },
    )
    return model
