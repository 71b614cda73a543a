import json

import pytest

from infer_browser.config.loader import MODEL_PATH_ENV, load_global_config
from infer_browser.config.model import NavLink
from infer_browser.core.exceptions import ConfigError


def _write_global(root, raw):
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(json.dumps(raw))


def test_defaults_when_global_json_missing(tmp_path, monkeypatch):
    monkeypatch.delenv(MODEL_PATH_ENV, raising=False)

    cfg = load_global_config(tmp_path)

    assert cfg.model_path == (tmp_path / "models" / "model.onnx").resolve()
    assert cfg.ui_title == "Minimal Inference Demo"
    assert cfg.providers == ["CPUExecutionProvider"]
    assert [link.label for link in cfg.nav_links] == ["Home", "Docs", "GitHub"]


def test_relative_model_path_resolves_against_config_root(tmp_path, monkeypatch):
    monkeypatch.delenv(MODEL_PATH_ENV, raising=False)
    root = tmp_path / "config"
    _write_global(
        root,
        {
            "ui_title": "Digits",
            "model_path": "../artifacts/digits.onnx",
            "nav_links": [{"label": "Repo", "href": "https://example.org"}],
        },
    )

    cfg = load_global_config(root)

    assert cfg.ui_title == "Digits"
    assert cfg.model_path == (tmp_path / "artifacts" / "digits.onnx").resolve()
    assert cfg.nav_links == [NavLink("Repo", "https://example.org")]


def test_env_overrides_model_path(tmp_path, monkeypatch):
    _write_global(tmp_path, {"model_path": "ignored.onnx"})
    override = tmp_path / "elsewhere" / "m.onnx"
    monkeypatch.setenv(MODEL_PATH_ENV, str(override))

    cfg = load_global_config(tmp_path)

    assert cfg.model_path == override


def test_malformed_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{not json")

    with pytest.raises(ConfigError, match="Malformed JSON"):
        load_global_config(tmp_path)


@pytest.mark.parametrize(
    "raw",
    [
        ["not", "an", "object"],
        {"providers": []},
        {"nav_links": "Home"},
        {"nav_links": [{"href": "#"}]},
    ],
)
def test_invalid_values_raise_config_error(tmp_path, raw):
    _write_global(tmp_path, raw)

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)
