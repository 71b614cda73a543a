from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from infer_browser.config.model import GlobalConfig, NavLink
from infer_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_MODEL_PATH = "models/model.onnx"
MODEL_PATH_ENV = "INFER_BROWSER_MODEL_PATH"


def _resolve(root: Path, raw: str) -> Path:
    path = Path(raw)
    if path.is_absolute():
        return path
    return (root / path).resolve()


def _parse_nav_links(raw: Any) -> List[NavLink]:
    if not isinstance(raw, list):
        raise ConfigError("nav_links must be a list of {label, href} objects")

    links: List[NavLink] = []
    for item in raw:
        if not isinstance(item, dict) or "label" not in item:
            raise ConfigError(f"Invalid nav link entry: {item!r}")
        links.append(NavLink(label=str(item["label"]), href=str(item.get("href", "#"))))
    return links


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load global.json from the config directory.

    A missing file is not fatal: the app starts with defaults so the page can
    still tell the user where the model is expected. The model path may be
    overridden with INFER_BROWSER_MODEL_PATH.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    raw: Dict[str, Any] = {}

    if global_path.is_file():
        try:
            with global_path.open() as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Malformed JSON in {global_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{global_path} must contain a JSON object")
    else:
        logger.warning(f"Global config not found at {global_path}; using defaults")

    model_raw = os.getenv(MODEL_PATH_ENV) or raw.get("model_path", DEFAULT_MODEL_PATH)

    kwargs: Dict[str, Any] = {"model_path": _resolve(root, model_raw)}
    for key in ("ui_title", "subtitle", "input_placeholder"):
        if key in raw:
            kwargs[key] = str(raw[key])
    if "providers" in raw:
        providers = raw["providers"]
        if not isinstance(providers, list) or not providers:
            raise ConfigError("providers must be a non-empty list of provider names")
        kwargs["providers"] = [str(p) for p in providers]
    if "nav_links" in raw:
        kwargs["nav_links"] = _parse_nav_links(raw["nav_links"])

    cfg = GlobalConfig(**kwargs)
    logger.info(
        "Global config loaded",
        extra={"model_path": str(cfg.model_path), "providers": cfg.providers},
    )
    return cfg
