from dataclasses import dataclass
from pathlib import Path

from infer_browser.config.model import GlobalConfig
from infer_browser.services.model_service import ModelManager


@dataclass
class AppConfig:
    """
    Shared state for the Dash app. Passed into layout + callback registration
    functions instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    model_manager: ModelManager
