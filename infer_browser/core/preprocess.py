from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np


def _to_number(token: str) -> Optional[float]:
    # float() also accepts digit separators such as 1_000
    if "_" in token:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def parse_vector(text: Optional[str]) -> List[float]:
    """
    Parse whitespace-separated numbers from free text.

    Tokens that are not numbers are skipped rather than rejected, so
    "1 2 abc 3" gives [1.0, 2.0, 3.0]. An empty result means nothing usable
    was typed.
    """
    if not text:
        return []

    values: List[float] = []
    for token in text.split():
        value = _to_number(token)
        if value is not None:
            values.append(value)
    return values


def to_batch(values: Sequence[float]) -> np.ndarray:
    """Wrap a vector as a single-row float32 batch of shape [1, N]."""
    return np.asarray([list(values)], dtype=np.float32)
