from __future__ import annotations

import json
from typing import Any

RESULT_FILENAME = "prediction_result.json"


def format_result(result: Any) -> str:
    """Pretty-printed JSON shown in the result card."""
    return json.dumps(result, indent=2)


def result_payload(result: Any) -> str:
    """Body of the downloaded file: the result wrapped as {"result": ...}."""
    return json.dumps({"result": result})
